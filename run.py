#!/usr/bin/env python3
"""Simple runner script for Post Insight."""

import subprocess
import sys
from pathlib import Path


def main():
    # Defaults
    port = 8501
    ui = False
    url = None

    # Parse simple args
    args = sys.argv[1:]
    if "--help" in args or "-h" in args or not args:
        print("""
Post Insight - 인스타그램 게시물 업로드 시간 / 참여 통계 분석

사용법:
    python run.py <URL>
    python run.py --ui [--port PORT]

옵션:
    --ui            Streamlit 화면 실행
    --port PORT     화면 포트 (기본: 8501)
    -h, --help      도움말 표시

예시:
    python run.py https://www.instagram.com/p/C-uOq4tS1tM/
    python run.py --ui --port 3000
""")
        return

    for i, arg in enumerate(args):
        if arg == "--ui":
            ui = True
        elif arg == "--port" and i + 1 < len(args):
            port = int(args[i + 1])
        elif arg.startswith("http"):
            url = arg

    try:
        import post_insight
    except ImportError as e:
        print(f"❌ 모듈 import 실패: {e}")
        print("\n설치 명령어:")
        print("  pip install -e .")
        sys.exit(1)

    if ui:
        app_path = Path(post_insight.__file__).parent / "app" / "streamlit_app.py"
        sys.exit(subprocess.call([
            sys.executable, "-m", "streamlit", "run", str(app_path),
            "--server.port", str(port),
        ]))

    if not url:
        print("❌ URL이 필요합니다. python run.py --help")
        sys.exit(2)

    result = post_insight.analyze_post_sync(url)
    print(result.to_json(indent=2))
    sys.exit(0 if result.success else 1)


if __name__ == "__main__":
    main()
