"""
Raster Transform Studio
Pixel-level image transforms driven by a small command language
"""

import logging
import sys

USAGE = """Usage: python main.py [--verbose] [--interactive]
       python main.py [--verbose] --script <commands.txt>
       python main.py [--verbose] --synthetic <output_dir>"""


def run_script(path: str) -> None:
    """Run a command script file."""
    from models.errors import ValidationError
    from scripting.runner import ScriptRunner

    runner = ScriptRunner()
    try:
        runner.run_file(path)
    except (ValidationError, OSError) as e:
        print(f"Could not run script: {e}", file=sys.stderr)
        sys.exit(1)


def run_interactive() -> None:
    """Read commands from stdin until exit."""
    from scripting.runner import ScriptRunner

    ScriptRunner().interactive()


def run_synthetic(output_dir: str) -> None:
    """Write the synthetic demo images to a directory."""
    from pathlib import Path
    from utils.image_io import save_image
    from utils.test_images import DEMO_IMAGES, generate_demo_image

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    for key in DEMO_IMAGES:
        image = generate_demo_image(key)
        ext = 'ppm' if key == 'static' else 'png'
        path = save_image(image, out / f"{key}.{ext}")
        print(f"Saved: {path} ({image.width}x{image.height})")


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)

    level = logging.WARNING
    if '--verbose' in args:
        args.remove('--verbose')
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    if not args or args == ['--interactive']:
        run_interactive()
    elif args[0] == '--script' and len(args) == 2:
        run_script(args[1])
    elif args[0] == '--synthetic' and len(args) == 2:
        run_synthetic(args[1])
    else:
        print(USAGE)
        sys.exit(0 if args[0] == '--help' else 2)


if __name__ == '__main__':
    main()
