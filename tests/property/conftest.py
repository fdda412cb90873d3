"""Hypothesis strategies for property-based testing."""

from hypothesis import strategies as st

from svnsimple.models.preferences import ProjectPreferences, SVNTraceLogs, UserPreferences


@st.composite
def generate_user_preferences(draw):
    """Generate random valid UserPreferences."""
    return UserPreferences(
        enabled_core_integration=draw(st.booleans()),
        enabled_overlay_icons=draw(st.booleans()),
        enabled_check_locks=draw(st.booleans()),
        auto_refresh_interval=draw(st.integers(min_value=-1, max_value=24 * 60 * 60)),
        trace_logs=draw(st.sampled_from(list(SVNTraceLogs))),
    )


@st.composite
def generate_project_preferences(draw):
    """Generate random valid ProjectPreferences."""
    path_text = st.text(
        alphabet=st.characters(blacklist_categories=("Cs",)), min_size=0, max_size=40
    )
    return ProjectPreferences(
        svn_cli_path=draw(path_text),
        exclude=draw(st.lists(path_text.filter(bool), max_size=8)),
    )
