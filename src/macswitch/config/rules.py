# Persona weighting, persona detection and the persona-specific texts shown
# alongside a recommendation.

PERSONA_WEIGHTS = {
    # persona tag: (cpu, ram, storage, gpu, battery, portability, description)
    'Developer': (1.2, 1.3, 1.1, 0.8, 1.0, 0.9,
                  "Developers need strong CPU and RAM for compiling, running VMs, and IDEs"),
    'Designer': (1.1, 1.2, 1.2, 1.3, 1.0, 1.0,
                 "Designers need GPU power for graphics work and color-accurate displays"),
    'OfficeWorker': (0.9, 1.0, 0.9, 0.7, 1.2, 1.1,
                     "Office workers prioritize battery life and portability"),
    'ITAdmin': (1.1, 1.2, 1.0, 0.8, 1.0, 1.0,
                "IT admins need reliable performance for multiple tools and VMs"),
    'DataAnalyst': (1.3, 1.4, 1.1, 0.9, 0.9, 0.8,
                    "Data analysts need maximum CPU and RAM for large datasets"),
    'Student': (0.9, 1.0, 0.9, 0.8, 1.3, 1.2,
                "Students need long battery life and portability for campus use"),
    'General': (1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
                "General use - balanced performance"),
}

# First persona whose keyword appears in any installed app name wins.
PERSONA_DETECTION_ORDER = [
    ('Developer', ["visual studio", "intellij", "docker", "kubernetes", "git", "node", "python"]),
    ('Designer', ["photoshop", "illustrator", "figma", "sketch", "premiere", "after effects"]),
    ('DataAnalyst', ["tableau", "power bi", "r studio", "jupyter", "matlab", "spss"]),
    ('ITAdmin', ["vmware", "virtualbox", "putty", "wireshark", "active directory", "sccm"]),
    ('OfficeWorker', ["office", "outlook", "teams", "slack", "chrome", "edge"]),
]

WORKFLOW_MATCHES = {
    'Developer': [
        "Faster compile times with Apple Silicon",
        "Better Docker/Kubernetes performance",
        "Native terminal and Unix tools",
    ],
    'Designer': [
        "Color-accurate Retina display",
        "Native Adobe Creative Suite support",
        "Better GPU performance for rendering",
    ],
    'OfficeWorker': [
        "Longer battery life for all-day meetings",
        "Instant wake from sleep",
        "Seamless Microsoft 365 integration",
    ],
}
NATIVE_APPS_WORKFLOW_MATCH = "All key apps run natively - optimal performance"

# (title, description, windows limitation)
PERSONA_ADVANTAGES = {
    'Developer': [
        ("3x Faster Build Times",
         "Apple Silicon compiles code 3x faster than equivalent Windows machines. "
         "Reduces CI/CD wait times and accelerates development cycles.",
         "Windows build processes are slower, increasing time-to-market and developer frustration."),
        ("Native Unix Environment",
         "Built-in terminal and Unix tools eliminate virtualization overhead. "
         "Docker runs natively with better performance.",
         "Windows requires WSL or virtual machines, adding complexity and performance overhead."),
        ("40% Lower IT Support",
         "Fewer driver issues, no antivirus conflicts, seamless updates. "
         "Saves 150+ IT hours annually per 100 developers.",
         "Windows requires constant driver updates, antivirus management, and troubleshooting."),
        ("Better Resale Value",
         "Retains 50% value after 3 years vs 15% for Windows. Reduces refresh cycle costs by 60%.",
         "Windows laptops depreciate faster, requiring more frequent replacements."),
    ],
    'Designer': [
        ("Color-Accurate Displays",
         "P3 wide color gamut and factory calibration ensure consistent color across devices. "
         "Critical for brand consistency.",
         "Windows displays vary widely, causing color mismatches and rework."),
        ("Faster Rendering & Export",
         "Apple Silicon GPU accelerates video editing and 3D rendering by 2-3x. "
         "Reduces project delivery time.",
         "Windows GPU performance inconsistent, leading to longer render times."),
        ("Seamless Creative Workflow",
         "Handoff between Mac, iPhone, and iPad is instant. "
         "Universal Clipboard and AirDrop accelerate collaboration.",
         "Windows lacks ecosystem integration, requiring manual file transfers and workflow interruptions."),
        ("Lower TCO Over 5 Years",
         "50% higher resale value and 40% fewer support tickets. Saves 30-40% total cost vs Windows.",
         "Windows requires more frequent replacements and higher support costs."),
    ],
    'OfficeWorker': [
        ("All-Day Battery Life",
         "18+ hours battery eliminates charger anxiety. "
         "Enables true mobile productivity in meetings and travel.",
         "Windows laptops typically last 6-8 hours, requiring frequent charging and disrupting workflow."),
        ("Instant Wake from Sleep",
         "Opens instantly, no boot delays. Saves 5-10 minutes daily per employee in meeting transitions.",
         "Windows boot and wake delays interrupt meetings and reduce productivity."),
        ("75% Less Downtime",
         "2 hours/year vs 8 hours/year for Windows. Prevents meeting cancellations and deadline misses.",
         "Windows updates and crashes cause frequent interruptions and lost work."),
        ("Higher Employee Satisfaction",
         "Mac users report 20% higher job satisfaction. Reduces turnover and recruitment costs.",
         "Windows frustrations reduce morale and increase attrition risk."),
    ],
    'ITAdmin': [
        ("40% Fewer Support Tickets",
         "Macs generate significantly fewer helpdesk requests. Frees IT team for strategic initiatives.",
         "Windows requires constant troubleshooting, driver updates, and antivirus management."),
        ("Built-in Enterprise Security",
         "Gatekeeper, FileVault, and SIP reduce security incidents by 60%. Lower compliance risk.",
         "Windows requires additional security tools and has higher malware vulnerability."),
        ("Simplified Device Management",
         "MDM integration is seamless. Fewer configuration issues and faster deployment cycles.",
         "Windows device management is more complex, requiring more IT overhead."),
        ("Longer Device Lifecycle",
         "5-7 year lifespan vs 3-4 years for Windows. Reduces procurement frequency by 40%.",
         "Windows devices degrade faster, requiring more frequent replacements."),
    ],
    'DataAnalyst': [
        ("Faster Data Processing",
         "Apple Silicon accelerates Python, R, and SQL queries by 2-3x. Reduces analysis time significantly.",
         "Windows data processing is slower, delaying insights and decision-making."),
        ("Native Development Tools",
         "Built-in terminal and package managers. No WSL or virtualization needed for data science workflows.",
         "Windows requires WSL or virtual machines for data science tools, adding complexity."),
        ("Better Memory Efficiency",
         "Unified memory architecture handles large datasets more efficiently. "
         "8GB Mac performs like 16GB Windows.",
         "Windows memory management is less efficient, requiring more RAM for same workloads."),
        ("Reduced IT Overhead",
         "40% fewer support tickets and 75% less downtime. IT team can focus on analytics infrastructure.",
         "Windows requires more IT support, reducing time for strategic initiatives."),
    ],
    'Student': [
        ("All-Day Battery for Classes",
         "18+ hours battery lasts entire school day. No need to hunt for power outlets between classes.",
         "Windows laptops typically need charging mid-day, disrupting learning."),
        ("Better Resale Value",
         "Retains 50% value after 3 years. Easier to upgrade or sell when graduating.",
         "Windows laptops lose value quickly, making upgrades expensive."),
        ("Seamless Ecosystem",
         "Works seamlessly with iPhone and iPad. Universal Clipboard and AirDrop enhance productivity.",
         "Windows lacks ecosystem integration with mobile devices."),
        ("Lower Long-term Cost",
         "Longer lifespan and higher resale offset initial cost. Better value over 4-5 years.",
         "Windows requires replacement sooner, increasing total cost of ownership."),
    ],
    'General': [
        ("40% Lower IT Support",
         "Fewer helpdesk tickets and faster resolution. Saves 150+ IT hours per 100 users annually.",
         "Windows requires more IT support, increasing overhead and reducing IT productivity."),
        ("Lower Total Cost of Ownership",
         "50% higher resale value, 40% fewer support tickets, longer lifespan. Saves 30-40% over 5 years.",
         "Windows has higher TCO due to faster depreciation and more support needs."),
        ("Enhanced Security",
         "60% fewer malware incidents. Built-in encryption and security features reduce compliance risk.",
         "Windows requires additional security tools and has higher vulnerability to threats."),
        ("75% Less Downtime",
         "2 hours/year vs 8 hours/year. Prevents productivity loss and business disruption.",
         "Windows experiences more crashes and update-related downtime."),
    ],
}

# Good / Better / Best presentation of the top three matches.
TIER_LABELS = ["Good", "Better", "Best"]
TIER_RATIONALES = {
    'Good': "Best value match - meets your requirements efficiently",
    'Better': "Enhanced performance - future-proof choice",
    'Best': "Maximum performance - professional grade",
}
TIER_ADVANTAGES = {
    'Good': ["Cost-effective", "Meets performance needs", "Great efficiency"],
    'Better': ["More power", "Better specs", "Longer lifespan"],
    'Best': ["Top-tier specs", "Best for demanding work", "Premium experience"],
}

# Windows price estimate (AED) when the caller does not know what the machine cost.
# family keywords → (price with >= 16 GB RAM, price below 16 GB)
WINDOWS_PRICE_ESTIMATES = [
    (("i7",), (6000, 5000)),
    (("i5",), (4500, 4000)),
    (("i3",), (3000, 3000)),
    (("ryzen 7",), (5500, 4500)),
    (("ryzen 5",), (4000, 3500)),
]
WINDOWS_PRICE_DEFAULT = 5000
WINDOWS_PRICE_RAM_THRESHOLD_GB = 16

EXPLANATION_TEMPLATE = (
    "Your {processor} with {win_ram} GB RAM requires higher specs mainly due to Windows overhead. "
    "A {model} with {mac_ram} GB unified memory can outperform it in typical {persona} workflows because: "
    "Mac's unified memory architecture is 25% more efficient, macOS uses resources more effectively "
    "than Windows, and Apple Silicon provides better performance per watt. "
)
EXPLANATION_FULL_COMPAT_TEXT = "All your key applications are fully compatible with macOS."
EXPLANATION_MOSTLY_COMPAT_TEXT = "Most applications work natively, with a few requiring simple alternatives."
