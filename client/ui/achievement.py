# client/ui/achievement.py

import streamlit as st
from client.core.forms import TRAITS, build_achievement, epoch_ms_to_date
from client.core.navigation import Event, Prompt, visible_panels
from client.services.api import (
    get_achievement,
    create_achievement,
    update_achievement,
    delete_achievement,
)
from client.ui.nav import dispatch, back_button, leave_prompt


def achievement_page(ctx, ui):
    panels = visible_panels(ui)
    back_button(ui)
    leave_prompt(ui)

    if "account-setup-blurb" in panels:
        st.title("🎉 Let's record your first accomplishment")
        st.markdown("Think of something you're proud of. It wasn't just luck!")
    elif "add-new-blurb" in panels:
        st.title("➕ Add an accomplishment")
    else:
        st.title("✏️ Edit accomplishment")

    existing = {}
    if ui.editing:
        existing = load_for_edit(ctx, ui.edit_id)
        if existing is None:
            return

    handle_form(ctx, ui, existing)

    if "delete-button" in panels:
        handle_delete(ctx, ui)


def load_for_edit(ctx, achievement_id):
    if st.session_state.get("edit_loaded_for") != achievement_id:
        result = get_achievement(ctx, achievement_id)
        if isinstance(result, dict) and result.get("error"):
            st.error(result["error"])
            return None
        st.session_state["edit_record"] = result
        st.session_state["edit_loaded_for"] = achievement_id
    return st.session_state["edit_record"]


def handle_form(ctx, ui, existing):
    form_key = f"{ui.screen.value}-{ui.edit_id}"
    checked = set(existing.get("achieveHow", []))
    # traits saved earlier that are not in the default list get their own checkbox
    options = TRAITS + [t for t in existing.get("achieveHow", []) if t not in TRAITS]

    with st.form(f"input-form-{form_key}"):
        what = st.text_input("What did you accomplish?", value=existing.get("achieveWhat", ""),
                             key=f"achieve-what-{form_key}")

        st.markdown("**How did you do it?**")
        how = []
        cols = st.columns(3)
        for i, trait in enumerate(options):
            with cols[i % 3]:
                if st.checkbox(trait, value=trait in checked, key=f"cb-{form_key}-{trait}"):
                    how.append(trait)
        extra = st.text_input("Other traits (comma separated)", key=f"extra-traits-{form_key}")

        when = st.date_input("When?", value=epoch_ms_to_date(existing.get("achieveWhen")),
                             key=f"datepicker-{form_key}")
        why = st.text_input("Why did it matter?", value=existing.get("achieveWhy", ""),
                            key=f"achieve-why-{form_key}")
        submitted = st.form_submit_button("I did this!", disabled=ui.prompt is not None)

    if not submitted:
        return

    if not what.strip():
        st.error("Please tell us what you accomplished.")
        return

    payload = build_achievement(what, how, when, why, extra)
    with st.spinner("Saving..."):
        if ui.editing:
            result = update_achievement(ctx, ui.edit_id, payload)
        else:
            result = create_achievement(ctx, payload)

    if isinstance(result, dict) and result.get("error"):
        st.error(result["error"])
        return

    st.session_state.pop("edit_loaded_for", None)
    st.session_state.pop("edit_record", None)
    dispatch(Event.SUBMITTED)


def handle_delete(ctx, ui):
    if ui.prompt is None:
        if st.button("🗑️ Delete", key="js-delete-button"):
            dispatch(Event.REQUEST_DELETE)
        return

    if ui.prompt != Prompt.DELETE:
        return

    st.warning("Are you SURE you want to delete this awesome accomplishment? "
               "Your data will be PERMANENTLY erased.")
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Yes, delete it", key="confirm-delete"):
            result = delete_achievement(ctx, ui.edit_id)
            if isinstance(result, dict) and result.get("error"):
                st.error(result["error"])
                return
            st.session_state.pop("edit_loaded_for", None)
            st.session_state.pop("edit_record", None)
            dispatch(Event.DELETED)
    with col2:
        if st.button("Cancel", key="cancel-delete"):
            dispatch(Event.CANCEL)
