import argparse
import threading
import time
import webbrowser

import uvicorn


def _open_browser_later(url: str, delay: float = 1.0) -> None:
    """
    Open the default web browser after a short delay.

    This lets the server start first so the page is reachable.
    """

    def _worker() -> None:
        time.sleep(delay)
        try:
            webbrowser.open(url)
        except Exception:
            # Don't crash the CLI if opening the browser fails (e.g. headless env)
            pass

    thread = threading.Thread(target=_worker, daemon=True)
    thread.start()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bracket-lens",
        description=(
            "Bracket lens server. Tokenizes code snippets, matches brackets "
            "and explains what each bracket is doing."
        ),
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host interface to bind the server to (default: 127.0.0.1).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to run the server on (default: 8000).",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open the API docs in a browser once the server is up.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """
    Entry point for the CLI.

    - Starts the FastAPI server.
    - Opens the default browser to the API docs unless --no-browser is given.
    """
    args = _build_parser().parse_args(argv)

    if not 0 < args.port < 65536:
        raise SystemExit(f"Invalid port: {args.port}")

    url = f"http://{args.host}:{args.port}"
    print(f"🚀 Starting server at {url}")
    print("   Press Ctrl+C to stop.")

    if not args.no_browser:
        _open_browser_later(f"{url}/docs")

    uvicorn.run(
        "bracket_lens.main:app",
        host=args.host,
        port=args.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
