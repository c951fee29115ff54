import json
from pathlib import Path

import pandas as pd
import streamlit as st

from macswitch.config.settings import CURRENCY
from macswitch.errors import NoMatchesError
from macswitch.models import Persona
from macswitch.recommend.engine import (
    compare_tco,
    default_reference_data,
    get_recommendation,
    get_tiers,
    stored_profile,
)
from macswitch.storage.profiles import InMemoryProfileStore

REPO_ROOT = Path(__file__).resolve().parent
SAMPLE_PROFILE = REPO_ROOT / "data" / "sample_profile.json"

st.set_page_config(page_title="MacSwitch", page_icon="💻", layout="wide")


@st.cache_resource(show_spinner=False)
def _reference():
    return default_reference_data()


@st.cache_resource(show_spinner=False)
def _profile_store():
    """Profiles uploaded during this server's lifetime, shared by all sessions."""
    store = InMemoryProfileStore()
    if SAMPLE_PROFILE.exists():
        store.import_profile(json.loads(SAMPLE_PROFILE.read_text(encoding="utf-8")), user_id="sample")
    return store


def _money(value: float) -> str:
    return f"{CURRENCY} {value:,.0f}"


ref = _reference()
store = _profile_store()

st.sidebar.header("Machine")
uploaded = st.sidebar.file_uploader("Machine profile (JSON)", type=["json"])
# import each upload once so the selector below can switch away from it
if uploaded is not None and st.session_state.get("imported_file") != uploaded.file_id:
    record = store.import_profile(json.loads(uploaded.getvalue().decode("utf-8-sig")))
    st.session_state["imported_file"] = uploaded.file_id
    st.session_state["user_id"] = record.user_id

user_ids = sorted(r.user_id for r in store.all())
if not user_ids:
    st.sidebar.error("Upload a machine profile to start.")
    st.stop()
current = st.session_state.get("user_id")
user_id = st.sidebar.selectbox(
    "Stored profile", user_ids, index=user_ids.index(current) if current in user_ids else 0
)
record = stored_profile(store, user_id)
profile, profile_apps = record.machine, list(record.applications)

st.sidebar.caption(f"{profile.processor} · {profile.physical_cores} cores · {profile.total_memory_gb}")
st.sidebar.caption(f"Catalog: {len(ref.catalog)} models")

st.sidebar.divider()
st.sidebar.subheader("Options")
persona_labels = ["Detect from apps"] + [p.value for p in Persona]
persona_label = st.sidebar.selectbox("Persona", persona_labels, index=0)
persona = None if persona_label == persona_labels[0] else persona_label
years = st.sidebar.radio("Horizon (years)", [3, 5], horizontal=True)
windows_price = st.sidebar.number_input(
    f"Windows price ({CURRENCY}, 0 = estimate)", min_value=0, value=0, step=100
)
apps_text = st.sidebar.text_area("Installed apps (one per line)", value="\n".join(profile_apps))
apps = [line.strip() for line in apps_text.splitlines() if line.strip()]

if not ref.catalog:
    st.error("The Mac catalog is empty or missing (data/macbooks.csv).")
    st.stop()

try:
    rec = get_recommendation(
        profile, ref.catalog, persona=persona, apps=apps, years=years, windows_price=windows_price,
        assumptions=ref.assumptions,
    )
    tiers = get_tiers(
        profile, ref.catalog, persona=persona, years=years, windows_price=windows_price,
        assumptions=ref.assumptions,
    )
    comparison = compare_tco(
        profile, ref.catalog, persona=persona, years=years, windows_price=windows_price,
        assumptions=ref.assumptions,
    )
except NoMatchesError as exc:
    st.warning(str(exc))
    st.stop()

st.title(f"{rec.recommended_mac.model}")
st.caption(f"{rec.persona.value} · similarity {rec.similarity:.3f}")

m1, m2, m3 = st.columns(3)
m1.metric("Windows TCO", _money(rec.windows_tco.total))
m2.metric("Mac TCO", _money(rec.mac_tco.total))
m3.metric("Savings", _money(comparison.savings_aed), f"{comparison.savings_pct:.1f}%")

st.write(rec.explanation)

left_col, right_col = st.columns(2)

with left_col:
    st.subheader("Good / Better / Best")
    tier_df = pd.DataFrame([
        {
            "tier": t.tier,
            "model": t.mac.model,
            "ram_gb": t.mac.ram_gb,
            "storage_gb": t.mac.storage_gb,
            "similarity": t.similarity,
            "tco": t.total_cost,
            "savings": t.savings,
            "savings_pct": t.savings_pct,
        }
        for t in tiers
    ])
    st.dataframe(tier_df, use_container_width=True)

    st.subheader("Performance radar")
    radar_df = pd.DataFrame({"Windows": rec.radar.windows, "Mac": rec.radar.mac})
    st.bar_chart(radar_df)

with right_col:
    st.subheader("Compatibility")
    st.caption(rec.port_compatibility.hub_recommendation)
    if rec.app_compatibilities:
        st.dataframe(
            pd.DataFrame([a.to_dict() for a in rec.app_compatibilities]),
            use_container_width=True,
        )
    else:
        st.info("No applications to check.")

    st.subheader("Environment")
    st.write(rec.carbon_footprint.description)

with st.expander("Why a Mac"):
    for adv in rec.mac_advantages:
        st.markdown(f"**{adv.title}** - {adv.description}")
        st.caption(adv.windows_limitation)
    for line in rec.workflow_matches:
        st.markdown(f"- {line}")

with st.expander("Full result"):
    st.json(rec.to_dict())

# Local: pip install -e ".[dashboard]" then streamlit run streamlit_app.py
