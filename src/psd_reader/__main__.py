import argparse
import logging
import sys
from typing import Optional

from psd_reader import decode
from psd_reader.exceptions import PSDDecodeError
from psd_reader.version import __version__

try:
    from IPython.lib.pretty import pprint
except ImportError:
    from pprint import pprint

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="psd-reader command line utility.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--encoding", default="macroman", help="Encoding of layer and resource names."
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    show_parser = subparsers.add_parser("show", help="Show the file content")
    show_parser.add_argument("input_file", help="Input PSD file")

    debug_parser = subparsers.add_parser(
        "debug", help="Show section offsets and decode warnings"
    )
    debug_parser.add_argument("input_file", help="Input PSD file")

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    package_logger = logging.getLogger("psd_reader")
    if args.verbose:
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(logging.INFO)

    with open(args.input_file, "rb") as f:
        data = f.read()

    try:
        psd = decode(data, encoding=args.encoding)
    except PSDDecodeError as e:
        logger.error("%s: %s" % (args.input_file, e))
        return 1

    if args.command == "show":
        pprint(psd)

    elif args.command == "debug":
        layer_info = psd.layer_and_mask_information.layer_info
        print("header: %s (%s)" % (psd.header.color_mode_name, psd.header))
        print(
            "color mode data: offset=%d, len=%d"
            % (psd.color_mode_data.offset, psd.color_mode_data.length)
        )
        print(
            "image resources: len=%d, count=%d"
            % (psd.image_resources.length, len(psd.image_resources))
        )
        if layer_info is not None:
            print(
                "channel image data: offset=%d, len=%d"
                % (layer_info.channel_image_data.offset,
                   layer_info.channel_image_data.length)
            )
        print(
            "image data: offset=%d, compression=%r, len=%d"
            % (psd.image_data.offset, psd.image_data.method, psd.image_data.length)
        )
        for warning in psd.warnings:
            print("warning: %s at %d: %s" % (
                warning.section, warning.offset, warning.message
            ))

    return None


if __name__ == "__main__":
    sys.exit(main())
