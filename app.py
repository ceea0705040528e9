"""
StudyBloom - Personal Learning Dashboard

Streamlit application for studying bundled courses, tracking section
completion and authoring new courses with a mock AI assistant.

Usage:
    streamlit run app.py
"""

import logging

import streamlit as st

from studybloom.config import LOG_FORMAT, LOG_LEVEL
from studybloom.builder import (
    CourseBuilder,
    generate_suggestions,
    CATEGORIES,
    EMOJIS,
    LEVELS,
    WIZARD_STEPS,
)
from studybloom.classroom import (
    CourseCatalog,
    CourseNavigator,
    ProgressTracker,
    UserSession,
)
from studybloom.schemas import SectionType, SignupData, UserRole, Visibility
from studybloom.utils import KeyValueStore
from studybloom.viewer import (
    get_assistant_css,
    get_course_css,
    get_markdown_css,
    render_completion_badge,
    render_congratulations,
    render_course_card,
    render_markdown,
    render_section_content,
    render_suggestion_card,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="StudyBloom",
    page_icon="🌸",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "store" not in st.session_state:
        st.session_state.store = KeyValueStore()

    if "catalog" not in st.session_state:
        st.session_state.catalog = CourseCatalog(st.session_state.store)

    if "progress" not in st.session_state:
        st.session_state.progress = ProgressTracker(st.session_state.store)

    if "session" not in st.session_state:
        st.session_state.session = UserSession(st.session_state.store)
        st.session_state.session.load()

    if "view_mode" not in st.session_state:
        st.session_state.view_mode = "dashboard"  # dashboard, course, builder, auth, profile

    if "current_course_id" not in st.session_state:
        st.session_state.current_course_id = None

    if "current_section_id" not in st.session_state:
        st.session_state.current_section_id = None

    if "builder" not in st.session_state:
        st.session_state.builder = None


def go_to(view_mode: str):
    st.session_state.view_mode = view_mode
    st.rerun()


def open_course(course_id: str):
    """Open a course at its first section."""
    course = st.session_state.catalog.get_course(course_id)
    if not course:
        st.error(f"Course not found: {course_id}")
        return
    st.session_state.current_course_id = course_id
    st.session_state.current_section_id = course.sections[0].id if course.sections else None
    go_to("course")


def select_section(section_id: str):
    st.session_state.current_section_id = section_id
    st.rerun()


# -----------------------------------------------------------------------------
# Sidebar
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with account links and course navigation."""
    st.sidebar.title("🌸 StudyBloom")

    session = st.session_state.session
    if session.is_authenticated:
        st.sidebar.markdown(f"Signed in as **{session.current_user.display_name}**")
        col1, col2 = st.sidebar.columns(2)
        with col1:
            if st.button("Profile", use_container_width=True):
                go_to("profile")
        with col2:
            if st.button("Sign out", use_container_width=True):
                session.logout()
                go_to("dashboard")
    else:
        if st.sidebar.button("Sign in / Sign up", use_container_width=True):
            go_to("auth")

    if st.sidebar.button("🏠 Dashboard", use_container_width=True):
        go_to("dashboard")

    if st.session_state.view_mode == "course":
        render_course_navigation()
    elif st.session_state.view_mode == "builder":
        render_suggestion_sidebar()


def render_course_navigation():
    """Render section list with status indicators and progress."""
    course = st.session_state.catalog.get_course(st.session_state.current_course_id)
    if not course:
        return

    nav = CourseNavigator(course, st.session_state.progress)
    stats = nav.get_progress_summary()

    st.sidebar.divider()
    st.sidebar.subheader(f"{course.emoji} {course.title}")
    st.sidebar.markdown(
        f"**Progress:** {stats['completed']}/{stats['total_completable']} sections "
        f"({stats['completion_percent']}%)"
    )
    st.sidebar.progress(min(stats['percent_exact'] / 100, 1.0))

    for item in nav.get_navigation_items(st.session_state.current_section_id):
        section = item.section
        indicator = nav.get_status_indicator(section.id)
        label = f"{indicator} {section.icon} {section.title}"
        if st.sidebar.button(
            label,
            key=f"nav_{section.id}",
            type="primary" if item.is_current else "secondary",
            use_container_width=True,
        ):
            select_section(section.id)


# -----------------------------------------------------------------------------
# Dashboard
# -----------------------------------------------------------------------------

def render_dashboard():
    """Render the course grid."""
    st.title("Your Courses")

    catalog = st.session_state.catalog
    progress = st.session_state.progress

    if st.button("➕ Create Course", type="primary"):
        start_builder()

    st.markdown(get_course_css(), unsafe_allow_html=True)

    courses = catalog.get_courses()
    if not courses:
        st.info("No courses yet. Create one to get started.")
        return

    cols = st.columns(2)
    for idx, course in enumerate(courses):
        with cols[idx % 2]:
            st.markdown(
                render_course_card(course, progress.get_completed(course.id)),
                unsafe_allow_html=True,
            )
            if st.button("Open", key=f"open_{course.id}", use_container_width=True):
                open_course(course.id)


# -----------------------------------------------------------------------------
# Course View
# -----------------------------------------------------------------------------

def render_course_view():
    """Render the current section of the current course."""
    course = st.session_state.catalog.get_course(st.session_state.current_course_id)
    if not course:
        st.error("Course not found.")
        return

    section_id = st.session_state.current_section_id
    section = course.get_section(section_id) if section_id else None
    if not section:
        st.info("This course has no sections yet.")
        return

    nav = CourseNavigator(course, st.session_state.progress)

    st.markdown(get_course_css(), unsafe_allow_html=True)
    st.markdown(get_markdown_css(), unsafe_allow_html=True)

    if nav.is_course_complete():
        st.markdown(render_congratulations(course), unsafe_allow_html=True)

    render_navigation_bar(nav, section_id)
    st.markdown(render_section_content(section), unsafe_allow_html=True)

    if course.is_completable(section_id):
        render_completion_section(course.id, section_id)


def render_navigation_bar(nav: CourseNavigator, section_id: str):
    """Render navigation bar with prev/next buttons."""
    pos, total = nav.get_section_position(section_id)
    prev_id = nav.get_previous_section_id(section_id)
    next_id = nav.get_next_section_id(section_id)

    col1, col2, col3 = st.columns([1, 2, 1])

    with col1:
        if prev_id and st.button("← Previous", use_container_width=True):
            select_section(prev_id)

    with col2:
        st.markdown(f"<center>Section {pos} of {total}</center>", unsafe_allow_html=True)

    with col3:
        if next_id and st.button("Next →", use_container_width=True):
            select_section(next_id)

    st.divider()


def render_completion_section(course_id: str, section_id: str):
    """Render the completion badge and toggle button."""
    progress = st.session_state.progress
    done = progress.is_completed(course_id, section_id)

    st.divider()
    st.markdown(render_completion_badge(done), unsafe_allow_html=True)

    label = "Mark as Incomplete" if done else "Mark as Completed"
    if st.button(label, type="secondary" if done else "primary", use_container_width=True):
        progress.toggle(course_id, section_id)
        st.rerun()


# -----------------------------------------------------------------------------
# Course Builder
# -----------------------------------------------------------------------------

def start_builder():
    if not st.session_state.session.is_authenticated:
        st.session_state.pending_view = "builder"
        go_to("auth")
    st.session_state.builder = CourseBuilder()
    go_to("builder")


def render_builder_view():
    """Render the three-step course wizard."""
    session = st.session_state.session
    if not session.is_authenticated:
        st.warning("Please sign in to create a course.")
        if st.button("Sign in"):
            go_to("auth")
        return

    if st.session_state.builder is None:
        st.session_state.builder = CourseBuilder()
    builder = st.session_state.builder

    st.title("Create a Course")
    st.progress(builder.current_step / len(WIZARD_STEPS))
    st.caption(f"Step {builder.current_step} of {len(WIZARD_STEPS)}: {builder.step_title}")

    if builder.current_step == 1:
        render_details_step(builder)
    elif builder.current_step == 2:
        render_structure_step(builder)
    else:
        render_content_step(builder)

    st.divider()
    col1, col2, col3 = st.columns([1, 2, 1])
    with col1:
        if not builder.is_first_step and st.button("← Back", use_container_width=True):
            builder.previous_step()
            st.rerun()
    with col2:
        message = builder.get_validation_message()
        if builder.is_valid_to_save:
            st.success(message)
        else:
            st.caption(message)
    with col3:
        if builder.is_last_step:
            if st.button("Save Course", type="primary", disabled=not builder.is_valid_to_save,
                         use_container_width=True):
                save_course(builder)
        elif st.button("Next →", type="primary", use_container_width=True):
            builder.next_step()
            st.rerun()


def render_details_step(builder: CourseBuilder):
    draft = builder.draft

    draft.title = st.text_input("Course title", value=draft.title)
    draft.description = st.text_area("Description", value=draft.description)

    col1, col2, col3 = st.columns(3)
    with col1:
        draft.emoji = st.selectbox("Emoji", EMOJIS, index=EMOJIS.index(draft.emoji) if draft.emoji in EMOJIS else 0)
    with col2:
        draft.category = st.selectbox("Category", CATEGORIES, index=CATEGORIES.index(draft.category))
    with col3:
        level_options = ["(none)"] + LEVELS
        chosen = st.selectbox(
            "Level", level_options,
            index=level_options.index(draft.level) if draft.level in LEVELS else 0,
        )
        draft.level = None if chosen == "(none)" else chosen

    visibility_options = [v.value for v in Visibility]
    draft.visibility = Visibility(st.radio(
        "Visibility", visibility_options,
        index=visibility_options.index(draft.visibility.value),
        horizontal=True,
    ))
    draft.estimated_time = st.text_input("Estimated time", value=draft.estimated_time, placeholder="e.g., 2 hours")

    col1, col2 = st.columns([3, 1])
    with col1:
        new_tag = st.text_input("Add tag", key="new_tag")
    with col2:
        if st.button("Add", use_container_width=True) and builder.add_tag(new_tag):
            st.rerun()
    for tag in list(draft.tags):
        if st.button(f"✕ {tag}", key=f"tag_{tag}"):
            builder.remove_tag(tag)
            st.rerun()


def render_structure_step(builder: CourseBuilder):
    type_options = [t.value for t in SectionType]

    for idx, section in enumerate(builder.draft.sections):
        with st.expander(f"{idx + 1}. {section.title or 'Untitled section'}", expanded=not section.title):
            title = st.text_input("Title", value=section.title, key=f"title_{section.id}")
            section_type = st.selectbox(
                "Type", type_options,
                index=type_options.index(section.type.value),
                key=f"type_{section.id}",
            )
            description = st.text_input("Description", value=section.description, key=f"desc_{section.id}")
            builder.update_section(section.id, title=title, type=section_type, description=description)
            if st.button("Remove section", key=f"remove_{section.id}"):
                builder.remove_section(section.id)
                st.rerun()

    if st.button("➕ Add section"):
        builder.add_section()
        st.rerun()

    st.subheader("Requirements")
    for label, ok, detail in builder.get_requirements_status():
        st.markdown(f"{'✅' if ok else '⬜'} **{label}:** {detail}")


def render_content_step(builder: CourseBuilder):
    if not builder.draft.sections:
        st.info("Add sections in the Structure step first.")
        return

    st.markdown(get_markdown_css(), unsafe_allow_html=True)
    for section in builder.draft.sections:
        st.subheader(section.title or "Untitled section")
        col1, col2 = st.columns(2)
        with col1:
            content = st.text_area(
                "Markdown", value=section.content, height=300,
                key=f"content_{section.id}",
            )
            builder.update_section(section.id, content=content)
        with col2:
            st.caption("Preview")
            st.markdown(render_markdown(content), unsafe_allow_html=True)


def render_suggestion_sidebar():
    """Render assistant suggestions for the current wizard step."""
    builder = st.session_state.builder
    if builder is None:
        return

    st.sidebar.divider()
    st.sidebar.subheader("✨ AI Assistant")
    st.sidebar.markdown(get_assistant_css(), unsafe_allow_html=True)

    suggestions = generate_suggestions(builder.draft, builder.current_step)
    if not suggestions:
        st.sidebar.caption("No suggestions right now.")
    for suggestion in suggestions:
        st.sidebar.markdown(render_suggestion_card(suggestion), unsafe_allow_html=True)
        if st.sidebar.button(suggestion.action, key=f"apply_{suggestion.id}", use_container_width=True):
            if builder.apply_suggestion(suggestion):
                st.rerun()


def save_course(builder: CourseBuilder):
    user = st.session_state.session.current_user
    try:
        course = builder.build_course(author=user.display_name)
        st.session_state.catalog.add_user_course(course)
    except ValueError as e:
        st.error(str(e))
        return

    logger.info(f"{user.username} created course {course.id}")
    st.session_state.builder = None
    open_course(course.id)


# -----------------------------------------------------------------------------
# Account Views
# -----------------------------------------------------------------------------

def render_auth_view():
    """Render sign-in and sign-up forms."""
    st.title("Welcome to StudyBloom")
    session = st.session_state.session

    tab1, tab2 = st.tabs(["Sign In", "Sign Up"])

    with tab1:
        with st.form("login"):
            email = st.text_input("Email")
            password = st.text_input("Password", type="password")
            if st.form_submit_button("Sign In", type="primary"):
                if session.login(email, password):
                    go_to(st.session_state.pop("pending_view", "dashboard"))
                else:
                    st.error("Invalid email or password.")

    with tab2:
        with st.form("signup"):
            col1, col2 = st.columns(2)
            with col1:
                first_name = st.text_input("First name")
            with col2:
                last_name = st.text_input("Last name")
            username = st.text_input("Username")
            email = st.text_input("Email", key="signup_email")
            password = st.text_input("Password", type="password", key="signup_password")
            role = st.selectbox("I am a", [r.value for r in UserRole if r != UserRole.ADMIN])
            if st.form_submit_button("Create Account", type="primary"):
                if not (email and password and username):
                    st.error("Email, username and password are required.")
                elif session.signup(SignupData(
                    email=email,
                    password=password,
                    username=username,
                    first_name=first_name,
                    last_name=last_name,
                    role=UserRole(role),
                )):
                    go_to(st.session_state.pop("pending_view", "dashboard"))
                else:
                    st.error("That email or username is already taken.")


def render_profile_view():
    """Render the signed-in user's profile editor."""
    session = st.session_state.session
    if not session.is_authenticated:
        go_to("auth")

    user = session.current_user
    st.title(f"👤 {user.display_name}")
    st.caption(f"{user.email} · {user.role.value} · joined {user.join_date:%Y-%m-%d}")

    authored = [c for c in st.session_state.catalog.get_user_courses() if c.author == user.display_name]
    st.markdown(f"**Courses created:** {len(authored)}")

    with st.form("profile"):
        first_name = st.text_input("First name", value=user.first_name)
        last_name = st.text_input("Last name", value=user.last_name)
        bio = st.text_area("Bio", value=user.bio)
        if st.form_submit_button("Save profile", type="primary"):
            session.update_profile(first_name=first_name, last_name=last_name, bio=bio)
            st.success("Profile updated.")
            st.rerun()


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()

    # Main content based on view mode
    if st.session_state.view_mode == "dashboard":
        render_dashboard()
    elif st.session_state.view_mode == "course":
        render_course_view()
    elif st.session_state.view_mode == "builder":
        render_builder_view()
    elif st.session_state.view_mode == "auth":
        render_auth_view()
    elif st.session_state.view_mode == "profile":
        render_profile_view()


if __name__ == "__main__":
    main()
