"""Entry point for the spinning hydroxymethylene terminal animation."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, cast

from .renderer.engine import Axis, RenderEngine, Scene
from .renderer.objects import hydroxymethylene_scene
from .renderer.terminal import DisplaySink, TerminalController

_AXES = {"x": Axis.X, "y": Axis.Y, "z": Axis.Z}


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="molecule-spin",
        description="ASCII animation of a rotating hydroxymethylene molecule",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=628,
        help="Number of frames to draw, 0.01 rad apart (default: 628, two turns)",
    )
    parser.add_argument(
        "--delay-ms",
        type=float,
        default=17.0,
        help="Pause after each frame in milliseconds (default: 17)",
    )
    parser.add_argument(
        "--axis",
        type=str,
        default="y",
        choices=sorted(_AXES),
        help="Principal axis the molecule spins around (default: y)",
    )
    parser.add_argument("--width", type=int, default=40, help="Frame width in characters (default: 40)")
    parser.add_argument("--height", type=int, default=20, help="Frame height in characters (default: 20)")
    parser.add_argument(
        "--nearest",
        action="store_true",
        help="Shade the closest sphere along each ray instead of the first in priority order",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal between frames",
    )
    args = parser.parse_args(argv)

    if args.frames < 1:
        parser.error("--frames must be at least 1")
    if args.delay_ms < 0:
        parser.error("--delay-ms must not be negative")
    if args.width < 1 or args.height < 1:
        parser.error("--width and --height must be at least 1")
    return args


@dataclass(frozen=True)
class RuntimeConfig:
    scene: Scene
    frame_count: int
    frame_delay: float
    clear: bool
    warnings: tuple[str, ...]


def _setup_runtime(args: argparse.Namespace, terminal_size: tuple[int, int]) -> RuntimeConfig:
    warnings: list[str] = []

    scene = hydroxymethylene_scene(
        width=args.width,
        height=args.height,
        rotation_axis=_AXES[args.axis],
        resolve_nearest=args.nearest,
    )

    columns, lines = terminal_size
    if columns < scene.width or lines < scene.height:
        warnings.append(
            f"Terminal is {columns}x{lines}, smaller than the {scene.width}x{scene.height} frame; "
            "output will wrap"
        )
    if args.no_clear:
        warnings.append("Clearing disabled: frames will scroll")

    return RuntimeConfig(
        scene=scene,
        frame_count=args.frames,
        frame_delay=args.delay_ms / 1000.0,
        clear=not args.no_clear,
        warnings=tuple(warnings),
    )


def _emit_warnings(warnings: Sequence[str]) -> None:
    if not warnings:
        return
    for warning in warnings:
        sys.stderr.write(f"[molecule-spin] {warning}\n")
    sys.stderr.flush()


def animate(engine: RenderEngine, sink: DisplaySink, frame_count: int, frame_delay: float) -> int:
    """Draw ``frame_count`` frames into ``sink`` and return how many were drawn."""

    drawn = 0
    for index in range(frame_count):
        sink.clear()
        sink.draw(cast(str, engine.render_frame(index)))
        sink.sleep(frame_delay)
        sink.clear()
        drawn += 1
    return drawn


def _run_sync_loop(config: RuntimeConfig, controller: TerminalController) -> None:
    engine = RenderEngine(config.scene)

    with controller as terminal:
        try:
            animate(engine, terminal, config.frame_count, config.frame_delay)
        except KeyboardInterrupt:  # pragma: no cover - interactive loop
            terminal.restore()
            sys.stdout.write("\nInterrupted. Bye!\n")
            sys.stdout.flush()


def run(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_arguments(argv)
    controller = TerminalController(clear=not args.no_clear)
    config = _setup_runtime(args, controller.size_tuple())
    _emit_warnings(config.warnings)
    _run_sync_loop(config, controller)


def main(argv: Optional[Sequence[str]] = None) -> int:
    run(argv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
