"""Streamlit UI for analyzing a single Instagram post."""

import logging

import streamlit as st

from post_insight.models import ExtractionResult
from post_insight.pipeline import analyze_post_sync
from post_insight.source import get_document_source, list_transports

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR = "예기치 않은 오류가 발생했습니다."


def render_result(result: ExtractionResult) -> None:
    """Render a result card, or the error banner."""
    if not result.success:
        st.error(result.error)
        return

    # Header: type badge and author
    col1, col2 = st.columns(2)
    col1.markdown(f"**{'릴스' if result.is_reel else '게시물'}**")
    if result.author:
        col2.markdown(f"@{result.author}")

    if result.image_url:
        try:
            st.image(result.image_url)
        except Exception:
            st.text("이미지 미리보기 없음")
    else:
        st.text("이미지 미리보기 없음")

    st.caption("업로드 시간 (KST)")
    st.subheader(result.upload_time)

    # Metrics grid
    likes_col, comments_col, views_col = st.columns(3)
    likes_col.metric("좋아요", result.likes or "-")
    comments_col.metric("댓글", result.comments or "-")
    views_col.metric("조회수", result.views or "-")

    if result.caption:
        with st.expander("캡션 미리보기", expanded=True):
            st.write(result.caption)


def main():
    st.set_page_config(page_title="인스타그램 게시물 분석", layout="centered")

    st.title("인스타그램 게시물 분석")
    st.caption("게시물 링크를 이용해 업로드 시간(KST)과 참여 통계를 확인하기")

    # Sidebar for configuration
    with st.sidebar:
        st.header("Settings")
        transport = st.selectbox(
            "Fetch method",
            options=list_transports(),
            index=list_transports().index("http"),
            help="browser renders the page with headless Chromium (requires playwright).",
        )
        timeout = st.number_input("Timeout (seconds)", min_value=1, max_value=120, value=15)

    url = st.text_input("게시물 URL", placeholder="https://www.instagram.com/p/...")

    if st.button("정보 조회"):
        if url:
            with st.spinner("분석 중..."):
                try:
                    source = get_document_source(transport, timeout=timeout)
                    result = analyze_post_sync(url, source=source)
                except Exception:
                    logger.exception("Unexpected failure analyzing %s", url)
                    st.error(UNEXPECTED_ERROR)
                    return
            render_result(result)
        else:
            st.warning("URL을 입력해주세요.")


if __name__ == "__main__":
    main()
