"""Helpers shared by the test modules."""

from io import BytesIO

from PIL import Image


def decode_png(data: bytes) -> Image.Image:
    img = Image.open(BytesIO(data))
    img.load()
    return img
