import streamlit as st
from sqlalchemy.exc import SQLAlchemyError

from tasklist.bootstrap import create_controller, create_store
from tasklist.core.config import get_settings
from tasklist.core.logging_setup import setup_logging
from tasklist.ui.model import TaskListModel

settings = get_settings()
setup_logging(settings.LOG_LEVEL)


@st.cache_resource
def get_store():
    return create_store(settings)


st.set_page_config(page_title=settings.APP_NAME, layout="centered")
st.title(settings.APP_NAME)

if "model" not in st.session_state:
    st.session_state.model = TaskListModel()
    st.session_state.controller = create_controller(st.session_state.model, get_store())

model = st.session_state.model
controller = st.session_state.controller


def run_action(action, *args) -> bool:
    try:
        action(*args)
    except SQLAlchemyError as e:
        st.error(f"Storage error: {e}")
        return False
    return True


@st.dialog("Add Task")
def add_task_dialog():
    title = st.text_input("Task name")
    description = st.text_area("Description")
    if st.button("Submit", type="primary"):
        if run_action(controller.add, title, description):
            st.rerun()


@st.dialog("Edit Task")
def edit_task_dialog(task):
    title = st.text_input("Task name", value=task.title)
    description = st.text_area("Description", value=task.description)
    if st.button("Submit", type="primary"):
        if run_action(controller.edit, task.id, title, description):
            st.rerun()


if st.button("Add Task", use_container_width=True):
    add_task_dialog()

if not len(model):
    st.info("No tasks yet.")

for task in model:
    with st.container(border=True):
        text_col, edit_col, delete_col = st.columns([8, 1, 1])
        with text_col:
            st.markdown(f"**{task.title}**")
            st.caption(task.description)
        if edit_col.button("✏️", key=f"edit-{task.id}", help="Edit"):
            edit_task_dialog(task)
        if delete_col.button("🗑️", key=f"delete-{task.id}", help="Delete"):
            if run_action(controller.delete, task.id):
                st.rerun()
