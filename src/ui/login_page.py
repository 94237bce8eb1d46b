"""Sign-in page for attendees and the conference admin."""
import streamlit as st

from src.services.admin_service import (
    get_current_user,
    login_admin,
    sign_in,
    sign_out,
)
from src.ui.html_utils import html_block, html_text


def _inject_login_styles():
    """Inject login page styles."""
    st.markdown(
        html_block(
            """
            <style>
            form[data-testid="stForm"] {
                max-width: 420px;
                margin: 32px auto;
                background: rgba(15, 17, 40, 0.96);
                border-radius: 24px;
                padding: 36px 40px;
                border: 1px solid rgba(148, 163, 184, 0.18);
                box-shadow: 0 24px 55px rgba(15, 17, 40, 0.55);
            }
            .login-title {
                color: #f8fafc;
                font-size: 30px;
                font-weight: 700;
                text-align: center;
                margin-bottom: 8px;
            }
            .login-description {
                color: rgba(203, 213, 225, 0.85);
                font-size: 14px;
                text-align: center;
            }
            </style>
            """
        ),
        unsafe_allow_html=True,
    )


def _render_attendee_form():
    with st.form("attendee_login_form", clear_on_submit=False):
        st.markdown("<h1 class='login-title'>🎫 與會者登入</h1>", unsafe_allow_html=True)
        st.markdown("<div class='login-description'>輸入姓名即可管理我的議程</div>", unsafe_allow_html=True)

        name = st.text_input("姓名", placeholder="請輸入您的姓名（1-50字元）", max_chars=50)
        submit = st.form_submit_button("登入", use_container_width=True, type="primary")

        if submit:
            success, message = sign_in(name)
            if success:
                st.session_state.current_page = "dashboard"
                st.rerun()
            else:
                st.error(f"❌ {message}")


def _render_admin_form():
    with st.form("admin_login_form", clear_on_submit=False):
        st.markdown("<h1 class='login-title'>🔐 管理員登入</h1>", unsafe_allow_html=True)
        st.markdown("<div class='login-description'>請輸入管理員帳號與密碼以繼續</div>", unsafe_allow_html=True)

        username = st.text_input("帳號", placeholder="請輸入管理員帳號", key="admin_username_input")
        password = st.text_input("密碼", type="password", placeholder="請輸入密碼", key="admin_password_input")

        submit = st.form_submit_button("登入", use_container_width=True, type="primary")

        if submit:
            if not username or not password:
                st.error("❌ 請輸入帳號和密碼")
            else:
                success, message = login_admin(username, password)
                if success:
                    st.session_state.current_page = "dashboard"
                    st.rerun()
                else:
                    st.error(f"❌ {message}")


def render_login_page():
    """Render sign-in forms, or the signed-in state with a sign-out button."""
    _inject_login_styles()

    user = get_current_user()
    if user.is_authenticated:
        role = "管理員" if user.is_admin else "與會者"
        st.markdown(
            f"<div class='login-description'>目前以{role} <b>{html_text(user.name)}</b> 登入</div>",
            unsafe_allow_html=True,
        )
        if st.button("🚪 登出", use_container_width=True):
            sign_out()
            st.session_state.current_page = "dashboard"
            st.rerun()
        return

    attendee_tab, admin_tab = st.tabs(["與會者", "管理員"])
    with attendee_tab:
        _render_attendee_form()
    with admin_tab:
        _render_admin_form()
