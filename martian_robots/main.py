"""
Martian Robots Simulation

Replays robots across a rectangular grid. Robots that walk off the edge
are reported LOST and leave a scent that stops later robots from falling
off the same cell.

Usage:
    martian-robots < input.txt
    martian-robots --input input.txt [options]

Examples:
    martian-robots < tests/sample_data/input1.txt
    martian-robots --input input.txt --snapshot --gif --out-dir results/
    martian-robots --input input.txt --config run.yaml --report
    martian-robots --input input.txt --log-level DEBUG
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import LOG_LEVELS, default_config, load_config
from .errors import MartianRobotsError
from .export.csv_writer import CSVWriter
from .export.reporter import Reporter
from .export.visualizer import Visualizer
from .formatter import format_output
from .model.engine import SimulationEngine
from .parser import parse_input

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Martian Robots Simulation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    martian-robots < tests/sample_data/input1.txt
    martian-robots --input input.txt --snapshot --gif --out-dir results/
    martian-robots --input input.txt --config run.yaml --report
        """
    )

    parser.add_argument('--input', type=Path, default=None,
                        help='Read input from file instead of stdin')
    parser.add_argument('--config', type=Path, default=None,
                        help='Path to YAML configuration file')
    parser.add_argument('--out-dir', type=Path, default=None,
                        help='Output directory for exports (default: ./output)')

    # Export toggles
    parser.add_argument('--csv', dest='csv', action='store_true', default=None,
                        help='Enable CSV export')
    parser.add_argument('--no-csv', dest='csv', action='store_false',
                        help='Disable CSV export (default)')

    parser.add_argument('--snapshot', dest='snapshot', action='store_true', default=None,
                        help='Enable final PNG snapshot')
    parser.add_argument('--no-snapshot', dest='snapshot', action='store_false',
                        help='Disable final PNG snapshot (default)')

    parser.add_argument('--gif', action='store_true', default=False,
                        help='Enable GIF animation export')
    parser.add_argument('--report', action='store_true', default=False,
                        help='Print summary report to stderr')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Only log errors')
    parser.add_argument('--log-level', choices=LOG_LEVELS, default=None,
                        help='Logging level (default: WARNING)')

    return parser.parse_args(argv)


def read_input(path: Optional[Path]) -> str:
    """Read the whole input, from a file or stdin until end of stream."""
    if path is not None:
        return Path(path).read_text(encoding='utf-8')
    return sys.stdin.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Load configuration
    try:
        config = load_config(args.config) if args.config else default_config()
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    # Apply CLI overrides
    if args.input is not None:
        config.input_path = args.input
    if args.out_dir is not None:
        config.out_dir = args.out_dir
    if args.csv is not None:
        config.export.csv = args.csv
    if args.snapshot is not None:
        config.export.snapshot = args.snapshot
    if args.gif:
        config.export.gif = True
    if args.report:
        config.export.report = True
    if args.log_level is not None:
        config.logging.level = args.log_level
    if args.quiet:
        config.quiet = True

    level = logging.ERROR if config.quiet else config.logging.numeric_level
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format='%(levelname)s %(name)s: %(message)s'
    )

    try:
        text = read_input(config.input_path)
    except FileNotFoundError:
        print(f"Error: Input file not found: {config.input_path}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read input: {e}", file=sys.stderr)
        return 1

    try:
        area, robots = parse_input(text)
    except MartianRobotsError as e:
        logger.debug("Rejected input", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info("Grid %dx%d, %d robots", area.width, area.height, len(robots))
    engine = SimulationEngine(area, robots)

    # Initialize exporters
    export = config.export
    csv_writer = None
    if export.csv:
        csv_writer = CSVWriter(config.out_dir / 'simulation_log.csv')
        csv_writer.open()

    visualizer = Visualizer(area)
    reporter = Reporter(str(config.input_path or '<stdin>'),
                        str(args.config) if args.config else None)

    final_state = None
    try:
        while not engine.is_finished():
            state = engine.step()
            final_state = state

            if csv_writer:
                csv_writer.append(state)
            if export.gif:
                visualizer.buffer_frame(state)
            reporter.update(state)
    finally:
        if csv_writer:
            csv_writer.close()

    summary = engine.get_summary()
    logger.info("Simulated %d robots: %d lost, %d scents",
                summary['robots_total'], summary['robots_lost'],
                summary['scents_recorded'])

    if csv_writer:
        logger.info("CSV saved: %s", csv_writer.output_path)

    if export.snapshot and final_state:
        snapshot_path = config.out_dir / 'final_state.png'
        visualizer.save_snapshot(final_state, snapshot_path)
        logger.info("Snapshot saved: %s", snapshot_path)

    if export.gif:
        gif_path = config.out_dir / 'simulation.gif'
        logger.info("Generating GIF (%d frames)...", len(visualizer.frames))
        visualizer.generate_gif(gif_path, fps=export.gif_fps)
        logger.info("Animation saved: %s", gif_path)

    if export.report and not config.quiet and final_state:
        report = reporter.generate_summary(
            final_state,
            config.out_dir,
            export.csv,
            export.snapshot,
            export.gif
        )
        print(report, file=sys.stderr)

    print(format_output(engine.robots))
    return 0


if __name__ == '__main__':
    sys.exit(main())
