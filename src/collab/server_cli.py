"""``collab-server``: run the projects API under uvicorn."""

import argparse
import os


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="collab-server",
        description="Serve the Collab projects API (projects, vacancies, join requests).",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Interface to listen on (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on (default: 8000)")
    parser.add_argument(
        "--local",
        action="store_true",
        help="Use a local SQLite file and create the tables on startup",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="Override COLLAB_LOG_LEVEL",
    )
    args = parser.parse_args(argv)

    # Settings are read when collab.main is imported by uvicorn, so the
    # overrides must be in the environment first.
    if args.local:
        os.environ["COLLAB_LOCAL_MODE"] = "1"
    if args.log_level:
        os.environ["COLLAB_LOG_LEVEL"] = args.log_level

    import uvicorn

    uvicorn.run("collab.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
