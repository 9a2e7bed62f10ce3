"""Gradient (Perlin) noise and fractal sums of it."""

from __future__ import annotations

import math
import struct

_PERMUTATION = (
    23, 199, 115, 250, 216, 154, 39, 97, 35, 254, 233, 200, 6, 207, 246, 77,
    30, 70, 198, 103, 44, 75, 189, 43, 195, 57, 98, 76, 100, 134, 63, 145,
    116, 90, 167, 64, 230, 197, 53, 169, 36, 216, 49, 203, 6, 255, 237, 14,
    122, 169, 76, 229, 165, 74, 222, 229, 108, 194, 248, 215, 78, 221, 13, 251,
    112, 4, 206, 196, 205, 128, 237, 219, 129, 158, 16, 255, 203, 237, 36, 34,
    188, 237, 14, 57, 72, 38, 187, 26, 99, 41, 197, 44, 186, 187, 56, 140,
    84, 212, 134, 158, 104, 149, 250, 138, 190, 17, 134, 248, 93, 28, 23, 106,
    213, 22, 27, 112, 28, 105, 248, 56, 46, 245, 121, 127, 251, 43, 105, 146,
    74, 133, 141, 244, 196, 64, 43, 125, 167, 37, 190, 137, 30, 157, 148, 104,
    204, 218, 1, 59, 55, 36, 153, 9, 254, 195, 65, 154, 87, 168, 174, 187,
    190, 234, 88, 56, 59, 195, 89, 201, 208, 184, 149, 91, 53, 104, 43, 137,
    142, 18, 50, 91, 165, 193, 72, 30, 198, 179, 118, 23, 157, 69, 205, 243,
    112, 239, 24, 90, 190, 122, 148, 241, 168, 170, 139, 26, 219, 127, 81, 170,
    125, 245, 96, 153, 151, 240, 62, 242, 158, 151, 222, 96, 240, 58, 27, 178,
    102, 190, 122, 47, 105, 95, 91, 17, 182, 65, 202, 243, 197, 121, 103, 240,
    89, 169, 175, 160, 136, 218, 14, 23, 178, 68, 217, 134, 152, 248, 100, 8,
)

_RANDTAB = _PERMUTATION * 2


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _grad(hash_value: int, x: float, y: float, z: float) -> float:
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (-u if h & 1 else u) + (-v if h & 2 else v)


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def perlin_noise3(
    x: float,
    y: float,
    z: float,
    x_wrap: int = 0,
    y_wrap: int = 0,
    z_wrap: int = 0,
) -> float:
    """Classic 3-D gradient noise; zero on every integer lattice point.

    The lattice repeats every 256 units; the wrap arguments are accepted
    for interface compatibility and have no further effect.
    """
    fx, fy, fz = math.floor(x), math.floor(y), math.floor(z)
    xi, yi, zi = int(fx) & 255, int(fy) & 255, int(fz) & 255
    x -= fx
    y -= fy
    z -= fz
    u, v, w = _fade(x), _fade(y), _fade(z)

    tab = _RANDTAB

    def corner(dx: int, dy: int, dz: int) -> int:
        return tab[tab[tab[xi + dx] + yi + dy] + zi + dz]

    near = _lerp(
        _lerp(_grad(corner(0, 0, 0), x, y, z), _grad(corner(1, 0, 0), x - 1, y, z), u),
        _lerp(
            _grad(corner(0, 1, 0), x, y - 1, z),
            _grad(corner(1, 1, 0), x - 1, y - 1, z),
            u,
        ),
        v,
    )
    far = _lerp(
        _lerp(
            _grad(corner(0, 0, 1), x, y, z - 1),
            _grad(corner(1, 0, 1), x - 1, y, z - 1),
            u,
        ),
        _lerp(
            _grad(corner(0, 1, 1), x, y - 1, z - 1),
            _grad(corner(1, 1, 1), x - 1, y - 1, z - 1),
            u,
        ),
        v,
    )
    return _lerp(near, far, w)


def fbm_noise3(
    x: float,
    y: float,
    z: float,
    lacunarity: float,
    gain: float,
    octaves: int,
) -> float:
    """Fractal Brownian motion: a sum of ``octaves`` scaled noise layers."""
    total = 0.0
    amplitude = 1.0
    for _ in range(octaves):
        total += perlin_noise3(x, y, z) * amplitude
        x *= lacunarity
        y *= lacunarity
        z *= lacunarity
        amplitude *= gain
    return total


def population_noise(x: float, y: float) -> float:
    """Population density estimate at map coordinates ``(x, y)``.

    Inputs and result are held to single precision.
    """
    return _f32(fbm_noise3(_f32(x), _f32(y), 0.0, 2.0, 0.5, 6))