"""QImage <-> PIL image conversion.

Layers store PIL images as their image reference so the Pillow rasterizer can
compose them; the canvas widget needs QPixmaps to paint them.
"""

from PIL import Image
from PyQt5.QtGui import QImage, QPixmap


def qimage_to_pil(qimage):
	"""Convert a QImage to an RGBA PIL image (copies the pixel data)"""
	converted = qimage.convertToFormat(QImage.Format_RGBA8888)
	width, height = converted.width(), converted.height()
	ptr = converted.constBits()
	ptr.setsize(converted.sizeInBytes())
	return Image.frombuffer(
		'RGBA', (width, height), bytes(ptr), 'raw', 'RGBA', converted.bytesPerLine(), 1
	).copy()


def pil_to_qimage(image):
	"""Convert a PIL image to a QImage that owns its pixel data"""
	rgba = image.convert('RGBA')
	data = rgba.tobytes('raw', 'RGBA')
	qimage = QImage(data, rgba.width, rgba.height, rgba.width * 4, QImage.Format_RGBA8888)
	return qimage.copy()


def pil_to_qpixmap(image):
	return QPixmap.fromImage(pil_to_qimage(image))
