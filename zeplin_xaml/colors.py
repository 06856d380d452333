"""Color → XAML #AARRGGBB."""

from .models import Color


def alpha_to_hex(alpha: float) -> str:
    # 四捨五入（非 banker's rounding），並補成兩位
    return f"{int(alpha * 255 + 0.5):02x}"


def to_hex_argb(color: Color) -> str:
    hex_channels = color.to_hex()
    return (
        "#"
        + alpha_to_hex(color.a)
        + hex_channels["r"]
        + hex_channels["g"]
        + hex_channels["b"]
    ).upper()
