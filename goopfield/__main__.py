"""Entry point: ``python -m goopfield``.

Supports two modes:
  - ``python -m goopfield``        → Launch the FastAPI server with a live spawn timer
  - ``python -m goopfield cli``    → Headless session with a random player policy
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Goop Field simulation engine")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--interval", type=float, default=1.0, help="Base spawn interval in seconds")
    srv.add_argument("--paused", action="store_true", help="Do not start the spawn timer on boot")
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run a headless session")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--spawns", type=int, default=200)
    cli.add_argument("--actions-per-spawn", type=int, default=2)
    cli.add_argument("--replay", type=str, default="replay.json")
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from goopfield.api.app import create_app
    from goopfield.config import FieldConfig

    config = FieldConfig(
        seed=args.seed,
        base_spawn_interval=args.interval,
        log_level=args.log_level,
    )
    app = create_app(config, autostart=not args.paused)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from goopfield.config import FieldConfig
    from goopfield.engine.headless import HeadlessRunner
    from goopfield.utils.logging import setup_logging
    from goopfield.utils.replay import ReplayRecorder

    config = FieldConfig(
        seed=args.seed,
        replay_file=args.replay,
        log_level=args.log_level,
    )
    setup_logging(config.log_level)

    recorder = ReplayRecorder(config.replay_file, config.seed)
    runner = HeadlessRunner(config, actions_per_spawn=args.actions_per_spawn, recorder=recorder)
    summary = runner.run(args.spawns)

    logger.info(
        "Spawns=%d shots=%d moves=%d eliminated=%d losses=%d best=%d final=%d",
        summary.spawns, summary.shots, summary.moves, summary.eliminated,
        summary.losses, summary.best_score, summary.final_score,
    )
    logger.info("Done. Replay written to %s", config.replay_file)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
