# gui/preview_window.py
from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit
from PyQt6.QtGui import QBrush, QColor, QFont, QRadialGradient
from PyQt6.QtCore import Qt

from gui.initials_widget import InitialsWidget, BackgroundStyle, Shape


def radial_background(rect):
    """Gray-to-blue radial gradient anchored at the trailing edge, like the sample avatar."""
    center = rect.center()
    center.setX(rect.right())
    gradient = QRadialGradient(center, 180, center)
    gradient.setColorAt(40 / 180, QColor("gray"))
    gradient.setColorAt(1.0, QColor("blue"))
    return QBrush(gradient)


class PreviewWindow(QMainWindow):
    """
    Development window: a name field bound to a live avatar plus a gallery of styling variants.
    """
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Initials Preview")
        self.resize(800, 600)
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        title = QLabel("Initials Preview")
        title.setFont(QFont("Arial", 16, QFont.Weight.Bold))
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("Name")
        layout.addWidget(self.name_edit)

        self.live_avatar = InitialsWidget(background=BackgroundStyle.RANDOM)
        self.live_avatar.setMinimumSize(120, 120)
        self.name_edit.textChanged.connect(self.live_avatar.setText)
        layout.addWidget(self.live_avatar)

        gallery = QHBoxLayout()
        self.gradient_avatar = InitialsWidget("Timo Zacherl", background=radial_background)
        self.yellow_avatar = InitialsWidget.from_initials("TZ", background="yellow", shape=Shape.CIRCLE)
        self.random_avatar = InitialsWidget("Ada Lovelace", background=BackgroundStyle.RANDOM)
        gallery.addWidget(self.gradient_avatar)
        gallery.addWidget(self.yellow_avatar)
        gallery.addWidget(self.random_avatar)
        layout.addLayout(gallery)

        sizes = QHBoxLayout()
        self.sized_avatars = []
        for side in (200, 100, 40):
            weight = QFont.Weight.DemiBold if side == 40 else None
            avatar = InitialsWidget.from_initials("TZ", font_weight=weight)
            avatar.setFixedSize(side, side)
            self.sized_avatars.append(avatar)
            sizes.addWidget(avatar)
        layout.addLayout(sizes)
