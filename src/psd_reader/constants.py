"""
Various constants for psd_reader
"""
from enum import Enum, IntEnum
from typing import Any, Optional


SIGNATURE = b"8BPS"
RESOURCE_SIGNATURE = b"8BIM"
BLEND_SIGNATURE = b"8BIM"


class _Lookup:
    """Mixin for fixed tables where an unknown value is not an error."""

    @classmethod
    def resolve(cls, value: Any) -> Optional[Any]:
        try:
            return cls(value)  # type: ignore[call-arg]
        except ValueError:
            return None


class ColorMode(_Lookup, IntEnum):
    """
    Color mode. Codes 5 and 6 are not assigned.
    """
    BITMAP = 0
    GRAYSCALE = 1
    INDEXED = 2
    RGB = 3
    CMYK = 4
    MULTICHANNEL = 7
    DUOTONE = 8
    LAB = 9

    @property
    def label(self) -> str:
        return _COLOR_MODE_LABELS[self]

    @staticmethod
    def name_of(value: int) -> str:
        """Returns the display name of the color mode code, or 'unknown'."""
        mode = ColorMode.resolve(value)
        if mode is None:
            return "unknown"
        return mode.label


_COLOR_MODE_LABELS = {
    ColorMode.BITMAP: "Bitmap",
    ColorMode.GRAYSCALE: "Grayscale",
    ColorMode.INDEXED: "Indexed",
    ColorMode.RGB: "RGB",
    ColorMode.CMYK: "CMYK",
    ColorMode.MULTICHANNEL: "Multichannel",
    ColorMode.DUOTONE: "Duotone",
    ColorMode.LAB: "Lab",
}


class ChannelID(_Lookup, IntEnum):
    """
    Channel types.
    """
    CHANNEL_0 = 0  # Red, Cyan, Gray, ...
    CHANNEL_1 = 1  # Green, Magenta, ...
    CHANNEL_2 = 2  # Blue, Yellow, ...
    CHANNEL_3 = 3  # Black, ...
    CHANNEL_4 = 4
    CHANNEL_5 = 5
    CHANNEL_6 = 6
    CHANNEL_7 = 7
    CHANNEL_8 = 8
    CHANNEL_9 = 9
    TRANSPARENCY_MASK = -1
    USER_LAYER_MASK = -2
    REAL_USER_LAYER_MASK = -3


_MASK_CHANNEL_NAMES = {
    ChannelID.TRANSPARENCY_MASK: "alpha",
    ChannelID.USER_LAYER_MASK: "user mask",
    ChannelID.REAL_USER_LAYER_MASK: "real user mask",
}

_COLOR_CHANNEL_NAMES = {
    ColorMode.BITMAP: ("gray",),
    ColorMode.GRAYSCALE: ("gray",),
    ColorMode.INDEXED: ("index",),
    ColorMode.RGB: ("red", "green", "blue"),
    ColorMode.CMYK: ("cyan", "magenta", "yellow", "black"),
    ColorMode.DUOTONE: ("gray",),
    ColorMode.LAB: ("lightness", "a", "b"),
}


def channel_name(channel_id: int, color_mode: int = ColorMode.RGB) -> Optional[str]:
    """
    Semantic tag of a layer channel id in the given color mode.

    Negative ids are masks. Non-negative ids index the color channels of
    the mode; ids beyond them (spot or multichannel planes) are not named.
    """
    if channel_id < 0:
        return _MASK_CHANNEL_NAMES.get(ChannelID.resolve(channel_id))  # type: ignore[arg-type]
    names = _COLOR_CHANNEL_NAMES.get(ColorMode.resolve(color_mode), ())  # type: ignore[arg-type]
    if channel_id < len(names):
        return names[channel_id]
    return None


class Clipping(_Lookup, IntEnum):
    """Clipping."""
    BASE = 0
    NON_BASE = 1


class BlendMode(_Lookup, Enum):
    """
    Blend modes. Keys are padded with spaces to 4 characters.
    """
    PASS_THROUGH = b'pass'
    NORMAL = b'norm'
    DISSOLVE = b'diss'
    DARKEN = b'dark'
    MULTIPLY = b'mul '
    COLOR_BURN = b'idiv'
    LINEAR_BURN = b'lbrn'
    DARKER_COLOR = b'dkCl'
    LIGHTEN = b'lite'
    SCREEN = b'scrn'
    COLOR_DODGE = b'div '
    LINEAR_DODGE = b'lddg'
    LIGHTER_COLOR = b'lgCl'
    OVERLAY = b'over'
    SOFT_LIGHT = b'sLit'
    HARD_LIGHT = b'hLit'
    VIVID_LIGHT = b'vLit'
    LINEAR_LIGHT = b'lLit'
    PIN_LIGHT = b'pLit'
    HARD_MIX = b'hMix'
    DIFFERENCE = b'diff'
    EXCLUSION = b'smud'
    SUBTRACT = b'fsub'
    DIVIDE = b'fdiv'
    HUE = b'hue '
    SATURATION = b'sat '
    COLOR = b'colr'
    LUMINOSITY = b'lum '

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'color burn'."""
        return self.name.lower().replace("_", " ")

    @staticmethod
    def name_of(key: Any) -> Optional[str]:
        """Returns the human readable name of a blend key, or None."""
        if isinstance(key, str):
            key = key.encode("latin-1")
        mode = BlendMode.resolve(key)
        if mode is None:
            return None
        return mode.label


class Compression(_Lookup, IntEnum):
    """
    Compression modes.

    Compression. 0 = Raw Data, 1 = RLE compressed, 2 = ZIP without prediction,
    3 = ZIP with prediction.
    """
    RAW = 0
    RLE = 1
    ZIP = 2
    ZIP_WITH_PREDICTION = 3


class Resource(_Lookup, IntEnum):
    """
    Image resource keys.

    Path info (2000 - 2997) and plug-in resources (4000 - 4999) are ranges
    and are not enumerated; see :py:meth:`is_path_info` and
    :py:meth:`is_plugin_resource`.
    """
    OBSOLETE1 = 1000
    MAC_PRINT_MANAGER_INFO = 1001
    MAC_PAGE_FORMAT_INFO = 1002
    OBSOLETE2 = 1003
    RESOLUTION_INFO = 1005
    ALPHA_NAMES_PASCAL = 1006
    DISPLAY_INFO_OBSOLETE = 1007
    CAPTION_PASCAL = 1008
    BORDER_INFO = 1009
    BACKGROUND_COLOR = 1010
    PRINT_FLAGS = 1011
    GRAYSCALE_HALFTONING_INFO = 1012
    COLOR_HALFTONING_INFO = 1013
    DUOTONE_HALFTONING_INFO = 1014
    GRAYSCALE_TRANSFER_FUNCTION = 1015
    COLOR_TRANSFER_FUNCTION = 1016
    DUOTONE_TRANSFER_FUNCTION = 1017
    DUOTONE_IMAGE_INFO = 1018
    EFFECTIVE_BW = 1019
    OBSOLETE3 = 1020
    EPS_OPTIONS = 1021
    QUICK_MASK_INFO = 1022
    OBSOLETE4 = 1023
    LAYER_STATE_INFO = 1024
    WORKING_PATH = 1025
    LAYER_GROUP_INFO = 1026
    OBSOLETE5 = 1027
    IPTC_NAA = 1028
    IMAGE_MODE_RAW = 1029
    JPEG_QUALITY = 1030
    GRID_AND_GUIDES_INFO = 1032
    THUMBNAIL_RESOURCE_PS4 = 1033
    COPYRIGHT_FLAG = 1034
    URL = 1035
    THUMBNAIL_RESOURCE = 1036
    GLOBAL_ANGLE = 1037
    COLOR_SAMPLERS_RESOURCE_OBSOLETE = 1038
    ICC_PROFILE = 1039
    WATERMARK = 1040
    ICC_UNTAGGED_PROFILE = 1041
    EFFECTS_VISIBLE = 1042
    SPOT_HALFTONE = 1043
    IDS_SEED_NUMBER = 1044
    ALPHA_NAMES_UNICODE = 1045
    INDEXED_COLOR_TABLE_COUNT = 1046
    TRANSPARENCY_INDEX = 1047
    GLOBAL_ALTITUDE = 1049
    SLICES = 1050
    WORKFLOW_URL = 1051
    JUMP_TO_XPEP = 1052
    ALPHA_IDENTIFIERS = 1053
    URL_LIST = 1054
    VERSION_INFO = 1057
    EXIF_DATA_1 = 1058
    EXIF_DATA_3 = 1059
    XMP_METADATA = 1060
    CAPTION_DIGEST = 1061
    PRINT_SCALE = 1062
    PIXEL_ASPECT_RATIO = 1064
    LAYER_COMPS = 1065
    ALTERNATE_DUOTONE_COLORS = 1066
    ALTERNATE_SPOT_COLORS = 1067
    LAYER_SELECTION_IDS = 1069
    HDR_TONING_INFO = 1070
    PRINT_INFO_CS2 = 1071
    LAYER_GROUPS_ENABLED_ID = 1072
    COLOR_SAMPLERS_RESOURCE = 1073
    MEASUREMENT_SCALE = 1074
    TIMELINE_INFO = 1075
    SHEET_DISCLOSURE = 1076
    DISPLAY_INFO = 1077
    ONION_SKINS = 1078
    COUNT_INFO = 1080
    PRINT_INFO_CS5 = 1082
    PRINT_STYLE = 1083
    MAC_NSPRINTINFO = 1084
    WINDOWS_DEVMODE = 1085
    AUTO_SAVE_FILE_PATH = 1086
    AUTO_SAVE_FORMAT = 1087
    PATH_SELECTION_STATE = 1088
    CLIPPING_PATH_NAME = 2999
    ORIGIN_PATH_INFO = 3000
    IMAGE_READY_VARIABLES = 7000
    IMAGE_READY_DATA_SETS = 7001
    IMAGE_READY_DEFAULT_SELECTED_STATE = 7002
    IMAGE_READY_7_ROLLOVER_EXPANDED_STATE = 7003
    IMAGE_READY_ROLLOVER_EXPANDED_STATE = 7004
    IMAGE_READY_SAVE_LAYER_SETTINGS = 7005
    IMAGE_READY_VERSION = 7006
    LIGHTROOM_WORKFLOW = 8000
    PRINT_FLAGS_INFO = 10000

    @staticmethod
    def is_path_info(value: int) -> bool:
        return 2000 <= value and value <= 2997

    @staticmethod
    def is_plugin_resource(value: int) -> bool:
        return 4000 <= value and value <= 4999
