"""
會議議程表主應用程式
Conference Schedule
"""
import logging
import streamlit as st

from src.services.admin_service import get_current_user
from src.ui.dashboard import render_dashboard
from src.ui.login_page import render_login_page
from src.utils.settings import get_log_level

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# Streamlit 頁面配置
st.set_page_config(
    page_title="會議議程表",
    page_icon="📅",
    layout="wide",
    initial_sidebar_state="collapsed"
)


def initialize_session_state():
    """初始化 session state 預設值。"""
    if "current_page" not in st.session_state:
        st.session_state.current_page = "dashboard"


def apply_custom_css():
    """套用自訂 CSS 樣式。"""
    st.markdown("""
        <style>
        .stApp {
            background: linear-gradient(135deg, #0f0c29 0%, #1a1a2e 50%, #16213e 100%);
        }

        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}
        header, [data-testid="stHeader"] {
            visibility: hidden;
            height: 0;
        }

        [data-testid="stAppViewContainer"] > .main .block-container {
            padding-top: 1.5rem;
        }

        .stButton > button {
            border-radius: 12px;
            font-weight: 600;
            border: none;
        }

        .stButton > button[kind="primary"] {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
        }

        .stTextInput > div > div > input {
            background: #16213e;
            border: 1px solid #2d3748;
            border-radius: 8px;
            color: #f1f5f9;
        }
        </style>
    """, unsafe_allow_html=True)


def render_navigation():
    """渲染導航選單。"""
    user = get_current_user()

    nav_col1, _, nav_col3 = st.columns([1, 2.4, 1], gap="small")

    with nav_col1:
        if st.button("📅 議程表", use_container_width=True, key="nav_schedule"):
            st.session_state.current_page = "dashboard"

    with nav_col3:
        label = f"👤 {user.name}" if user.is_authenticated else "👤 登入"
        if st.button(label, use_container_width=True, key="nav_login"):
            st.session_state.current_page = "login"


def render_current_page():
    """根據當前頁面狀態渲染對應內容。"""
    try:
        if st.session_state.current_page == "dashboard":
            render_dashboard()

        elif st.session_state.current_page == "login":
            render_login_page()

        else:
            st.error(f"未知的頁面：{st.session_state.current_page}")
            if st.button("返回議程表"):
                st.session_state.current_page = "dashboard"
                st.rerun()

    except Exception as e:
        # 錯誤邊界
        logger.exception("Unhandled exception while rendering page")
        st.error("發生錯誤，請稍後再試")

        with st.expander("🔍 錯誤詳情"):
            st.code(str(e))

        if st.button("返回議程表"):
            st.session_state.current_page = "dashboard"
            st.query_params.clear()
            st.rerun()


def main():
    """主應用程式入口。"""
    initialize_session_state()
    apply_custom_css()
    render_navigation()
    render_current_page()


if __name__ == "__main__":
    main()
