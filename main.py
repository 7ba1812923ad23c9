#!/usr/bin/env python3
"""
Insect Trajectory Playback - Main Entry Point

Plays back pre-simulated insect trajectories, several experimental
conditions side by side, or one condition with its position distribution.

Usage:
    python main.py data/control.csv data/co2.csv        # compare conditions
    python main.py --density data/visual_co2.csv        # one condition + density view
    python main.py --y-down --no-grid data/*.csv        # data y axis points down, no grid
"""
import sys
import logging
from PyQt5 import QtWidgets

# Configure logging FIRST - before any other imports
logging.basicConfig(
    level=logging.INFO,
    format='[%(levelname)s] %(name)s: %(message)s',
    stream=sys.stdout
)

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

print("="*60)
print("🦟 TRAJECTORY PLAYBACK STARTING...")
print("="*60)

from playback.config import PlaybackConfig, StreamConfig
from ui.main_window import MainWindow

print("✅ All modules imported successfully")

FLAGS = ("--density", "--y-down", "--no-grid")


def parse_args(argv):
    """
    Split command line into data files and flags.

    Returns:
        (paths, density, y_up, show_grid)
    """
    unknown = [a for a in argv if a.startswith("--") and a not in FLAGS]
    if unknown:
        raise ValueError(f"Unknown option(s): {', '.join(unknown)}. Known: {', '.join(FLAGS)}")

    paths = [a for a in argv if not a.startswith("--")]
    if not paths:
        raise ValueError("No data files given. Usage: python main.py [--density] data1.csv [data2.csv ...]")

    density = "--density" in argv
    if density and len(paths) > 1:
        raise ValueError("--density shows a single condition; pass exactly one data file")

    return paths, density, "--y-down" not in argv, "--no-grid" not in argv


def main(argv):
    """
    Entry point for the playback viewer.

    Args:
        argv: Command line arguments without the program name
    """
    paths, density, y_up, show_grid = parse_args(argv)
    config = PlaybackConfig.from_env()
    stream_configs = StreamConfig.from_paths(
        paths, size=config.canvas_size, y_up=y_up, show_grid=show_grid
    )

    print(f"\n📋 Conditions: {', '.join(c.title for c in stream_configs)}")
    print(f"⚙️  {config.fps} fps, trail {config.trail_length} (offset {config.trail_offset}), "
          f"chunk {config.chunk_size}")

    print("🔧 Creating Qt application...")
    app = QtWidgets.QApplication(sys.argv)

    print("🖥️  Creating main window...")
    window = MainWindow(config, stream_configs, density=density)
    window.show()

    print("🚀 Loading data and precomputing frames...")
    window.start()

    print("\n" + "="*60)
    print("✅ VIEWER READY - playback starts once every condition is precomputed")
    print("="*60 + "\n")

    result = app.exec_()

    print("👋 Goodbye!")
    sys.exit(result)


def run():
    """Console script entry point."""
    print(f"🎯 Command line args: {sys.argv}")

    try:
        main(sys.argv[1:])
    except Exception as e:
        print("\n" + "="*60)
        print("❌ FATAL ERROR:")
        print("="*60)
        print(f"Error type: {type(e).__name__}")
        print(f"Error message: {e}")
        import traceback
        print("\nFull traceback:")
        traceback.print_exc()
        print("="*60)
        sys.exit(1)


if __name__ == "__main__":
    run()
