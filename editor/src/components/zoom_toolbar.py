"""Zoom toolbar widget with zoom controls."""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QToolButton, QLabel
from PyQt5.QtCore import pyqtSignal


class ZoomToolbar(QWidget):
	"""Toolbar with zoom in/out/reset buttons and a zoom level readout"""

	zoom_in_requested = pyqtSignal()
	zoom_out_requested = pyqtSignal()
	reset_requested = pyqtSignal()

	def __init__(self, parent=None):
		super().__init__(parent)

		layout = QHBoxLayout()
		layout.setContentsMargins(0, 0, 0, 0)
		layout.setSpacing(4)

		# Zoom out button
		self.zoom_out_btn = QToolButton()
		self.zoom_out_btn.setText("−")
		self.zoom_out_btn.setToolTip("Zoom Out")
		self.zoom_out_btn.clicked.connect(self.zoom_out_requested)
		layout.addWidget(self.zoom_out_btn)

		# Zoom level readout
		self.zoom_label = QLabel("100%")
		self.zoom_label.setMinimumWidth(48)
		layout.addWidget(self.zoom_label)

		# Zoom in button
		self.zoom_in_btn = QToolButton()
		self.zoom_in_btn.setText("+")
		self.zoom_in_btn.setToolTip("Zoom In")
		self.zoom_in_btn.clicked.connect(self.zoom_in_requested)
		layout.addWidget(self.zoom_in_btn)

		self.reset_btn = QToolButton()
		self.reset_btn.setText("1:1")
		self.reset_btn.setToolTip("Reset Zoom and Pan")
		self.reset_btn.clicked.connect(self.reset_requested)
		layout.addWidget(self.reset_btn)

		self.setLayout(layout)

	def set_zoom_percent(self, percent):
		"""Update the readout (does not emit)"""
		self.zoom_label.setText(f"{percent}%")

	def get_zoom_percent(self):
		return int(self.zoom_label.text().rstrip('%'))
