"""Geohash encoding for geographic points.

Standard base32 geohash (Niemeyer): alternating longitude/latitude bisection,
five bits per character. Used to index user-written geo values as strings so
prefix queries find nearby points.
"""

_BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"


def encode_geohash(latitude: float, longitude: float, precision: int = 11) -> str:
    """Encode a coordinate pair as a geohash string.

    Args:
        latitude: Latitude in degrees (-90..90).
        longitude: Longitude in degrees (-180..180).
        precision: Number of characters (1-12).

    Returns:
        Geohash string of length precision.

    Raises:
        ValueError: If coordinates or precision are out of range.
    """
    if not -90.0 <= latitude <= 90.0:
        raise ValueError(f"latitude must be between -90 and 90, got: {latitude}")
    if not -180.0 <= longitude <= 180.0:
        raise ValueError(f"longitude must be between -180 and 180, got: {longitude}")
    if not 1 <= precision <= 12:
        raise ValueError(f"precision must be between 1 and 12, got: {precision}")

    lat_range = [-90.0, 90.0]
    lon_range = [-180.0, 180.0]
    chars: list[str] = []
    bits = 0
    bit_count = 0
    even = True
    while len(chars) < precision:
        if even:
            mid = (lon_range[0] + lon_range[1]) / 2
            if longitude >= mid:
                bits = (bits << 1) | 1
                lon_range[0] = mid
            else:
                bits <<= 1
                lon_range[1] = mid
        else:
            mid = (lat_range[0] + lat_range[1]) / 2
            if latitude >= mid:
                bits = (bits << 1) | 1
                lat_range[0] = mid
            else:
                bits <<= 1
                lat_range[1] = mid
        even = not even
        bit_count += 1
        if bit_count == 5:
            chars.append(_BASE32[bits])
            bits = 0
            bit_count = 0
    return "".join(chars)
