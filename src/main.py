# main.py
import argparse
import sys
from typing import List, Optional
from core.vector import Point3
from renderer.settings import DEFAULT_IMAGE_WIDTH, ImageSettings, default_camera, default_scene
from renderer.raytracer import Renderer
from renderer.ppm import save_ppm, write_ppm
from renderer.image_io import save_image

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render a single sphere against a sky gradient as an ASCII PPM image.")
    parser.add_argument("-o", "--output", default=None,
                        help="PPM file to write (default: standard output)")
    parser.add_argument("--png", default=None,
                        help="also save the image with Pillow, format taken from the suffix")
    parser.add_argument("--width", type=int, default=DEFAULT_IMAGE_WIDTH,
                        help=f"image width in pixels (default: {DEFAULT_IMAGE_WIDTH})")
    parser.add_argument("--look-from", type=float, nargs=3, metavar=("X", "Y", "Z"), default=None,
                        help="camera position (default: 0 0 0)")
    parser.add_argument("--look-at", type=float, nargs=3, metavar=("X", "Y", "Z"), default=None,
                        help="point the camera aims at (default: straight down -z)")
    parser.add_argument("--vfov", type=float, default=None,
                        help="vertical field of view in degrees (default: 2.0 unit viewport)")
    parser.add_argument("--parallel", action="store_true",
                        help="render with the compiled multi-threaded kernel")
    parser.add_argument("--show", action="store_true",
                        help="open a preview window when rendering finishes")
    parser.add_argument("--quiet", action="store_true",
                        help="do not report progress on standard error")
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    progress = not args.quiet

    try:
        settings = ImageSettings(image_width=args.width)
        camera = default_camera(
            settings,
            look_from=None if args.look_from is None else Point3(*args.look_from),
            look_at=None if args.look_at is None else Point3(*args.look_at),
            vfov_degrees=args.vfov)
        renderer = Renderer(settings, camera, default_scene())
        if args.parallel:
            image = renderer.render_parallel(progress=progress)
        else:
            image = renderer.render(progress=progress)

        if args.output is None:
            write_ppm(sys.stdout, image)
        else:
            save_ppm(args.output, image)
            if progress:
                print(f"Wrote {args.output}", file=sys.stderr)

        if args.png is not None:
            save_image(args.png, image)
            if progress:
                print(f"Wrote {args.png}", file=sys.stderr)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.show:
        # pygame is only needed for the preview window
        from viewer.window import show_image
        show_image(image)

    return 0

if __name__ == "__main__":
    sys.exit(main())
