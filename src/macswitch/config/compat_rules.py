# App-compatibility tables. All predicates receive the lower-cased app name.

CATEGORY_SCORES = {
    'NativeMacOS': 1.0,
    'WebSaaS': 1.0,
    'Rosetta2Compatible': 0.95,
    'AlternativeAvailable': 0.85,
    'RequiresVirtualization': 0.75,
    'NotCompatible': 0.3,
}

CATEGORY_NOTES = {
    'NativeMacOS': "Fully native macOS app - optimal performance",
    'WebSaaS': "Available as web app - works perfectly in browser",
    'Rosetta2Compatible': "Runs via Rosetta 2 - excellent compatibility",
    'AlternativeAvailable': "Native macOS alternative available (e.g., {alternative})",
    'RequiresVirtualization': "Requires Parallels Desktop or similar - good performance",
    'NotCompatible': "Limited compatibility - may need alternative solution",
}

ALTERNATIVES = [
    ("project", "OmniPlan or Asana"),
    ("visio", "Lucidchart or OmniGraffle"),
]
DEFAULT_ALTERNATIVE = "macOS alternative"

# Curated keyword table, first substring hit wins. Multi-word keys sit
# before the shorter keys they contain.
APP_KEYWORDS = [
    ("microsoft office", 'NativeMacOS'),
    ("adobe photoshop", 'NativeMacOS'),
    ("adobe illustrator", 'NativeMacOS'),
    ("adobe premiere", 'NativeMacOS'),
    ("figma", 'NativeMacOS'),
    ("slack", 'NativeMacOS'),
    ("zoom", 'NativeMacOS'),
    ("chrome", 'NativeMacOS'),
    ("firefox", 'NativeMacOS'),
    ("spotify", 'NativeMacOS'),
    ("visual studio code", 'NativeMacOS'),
    ("vscode", 'NativeMacOS'),
    ("docker", 'NativeMacOS'),
    ("cursor", 'NativeMacOS'),
    ("postman", 'NativeMacOS'),
    ("insomnia", 'NativeMacOS'),
    ("sublime text", 'NativeMacOS'),
    ("atom", 'NativeMacOS'),
    ("node.js", 'NativeMacOS'),
    ("nodejs", 'NativeMacOS'),
    ("git", 'NativeMacOS'),
    ("python", 'NativeMacOS'),
    ("teams", 'NativeMacOS'),
    ("outlook", 'WebSaaS'),
    ("gmail", 'WebSaaS'),
    ("google workspace", 'WebSaaS'),
    ("salesforce", 'WebSaaS'),
    ("notion", 'WebSaaS'),
    ("autocad", 'Rosetta2Compatible'),
    ("solidworks", 'Rosetta2Compatible'),
    ("visual studio", 'RequiresVirtualization'),
    ("sql server management", 'RequiresVirtualization'),
    ("active directory", 'RequiresVirtualization'),
    ("microsoft project", 'AlternativeAvailable'),
    ("visio", 'AlternativeAvailable'),
]


def _has(name, *needles):
    return any(n in name for n in needles)


def _lacks(name, *needles):
    return not _has(name, *needles)


# Installer plumbing and system components that are not user-facing apps.
NOISE_PREDICATES = [
    lambda n: _has(n, ".net framework", "targeting pack", "multi-targeting", "bootstrapper"),
    lambda n: "microsoft .net" in n and "office" not in n,
    lambda n: "sdk" in n and ".net" in n and _lacks(n, "core", "5", "6", "7", "8"),
    lambda n: _has(n, "clickonce", "kudu", "iisnode", "url rewrite"),
    lambda n: "mercurial" in n and "x86" in n,
    lambda n: "active directory" in n and "library" in n,
    lambda n: _has(n, "update health", "health tools", "system component"),
    lambda n: "microsoft" in n and "framework" in n and "office" not in n,
]

VSCODE_NOTE = "Visual Studio Code available natively on macOS - excellent developer experience"


def _is_vscode(n):
    return _has(n, "visual studio code", "vscode")


def _is_microsoft(n):
    return _has(n, "microsoft", "ms ")


def _is_windows_tool(n):
    return "windows" in n and _lacks(n, "update", "sdk")


# Heuristics for names the keyword table does not know.
# (predicate, category, note); a ``None`` note means the category template.
FALLBACK_RULES = [
    (lambda n: _is_microsoft(n) and "code" in n and _lacks(n, "sdk", ".net", "update"),
     'NativeMacOS', VSCODE_NOTE),
    (lambda n: _is_microsoft(n) and _has(n, "office", "365", "word", "excel", "powerpoint", "outlook"),
     'NativeMacOS', "Microsoft Office available natively on macOS"),
    (lambda n: _is_microsoft(n) and "visual studio" in n,
     'RequiresVirtualization', "Visual Studio (not Code) requires Parallels Desktop or alternative solution"),
    (lambda n: _is_microsoft(n) and "edge" in n,
     'NativeMacOS', "Microsoft Edge available natively on macOS"),
    (lambda n: _is_microsoft(n) and "onedrive" in n,
     'NativeMacOS', "OneDrive available natively on macOS"),
    (_is_microsoft,
     'RequiresVirtualization', "May require Parallels or alternative solution"),
    (lambda n: "chrome" in n,
     'NativeMacOS', None),
    (lambda n: _has(n, "node", "git", "python", "cursor", "docker", "postman", "insomnia", "sublime", "atom"),
     'NativeMacOS', "Available natively on macOS - excellent developer tools"),
    (lambda n: _has(n, "zoom", "teams", "slack"),
     'NativeMacOS', None),
    (_is_windows_tool,
     'RequiresVirtualization', "Windows-specific - may require alternative or virtualization"),
    (lambda n: _has(n, "update health", "health tools"),
     'RequiresVirtualization', "Windows-specific tool - may require alternative or virtualization"),
]


def _keyword(keyword):
    return lambda n: keyword in n


# Every classification rule in evaluation order, first match wins:
# VS Code, then the keyword table, then the heuristics.
COMPAT_RULES = (
    [(_is_vscode, 'NativeMacOS', VSCODE_NOTE)]
    + [(_keyword(k), category, None) for k, category in APP_KEYWORDS]
    + FALLBACK_RULES
)

DEFAULT_CATEGORY = 'WebSaaS'
DEFAULT_SCORE = 0.9
DEFAULT_NOTE = "Likely available as web app or macOS alternative"

# ── Ports ───────────────────────────────────────────────────────────
# (port label, tokens searched in the upper-cased port string)
PORT_TOKENS = [
    ("HDMI", ("HDMI",)),
    ("USB-A", ("USB-A", "USB 3")),
    ("USB-C", ("USB-C", "TB", "THUNDERBOLT")),
    ("Thunderbolt", ("USB-C", "TB", "THUNDERBOLT")),
    ("Ethernet", ("ETHERNET", "RJ-45")),
    ("SD Card", ("SD",)),
]
# (port label, tokens whose presence means the port is covered)
REQUIRED_PORTS = [
    ("HDMI", ("HDMI", "THUNDERBOLT")),
    ("USB-A", ("USB-A", "USB 3")),
    ("Ethernet", ("ETHERNET", "RJ-45")),
]
HUB_RECOMMENDATION = "Recommended: USB-C Hub with {ports} - AED 150-300"
NO_HUB_NEEDED = "No hub needed - all ports available"
