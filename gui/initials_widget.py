# gui/initials_widget.py
import enum
import logging

from PyQt6.QtWidgets import QWidget
from PyQt6.QtGui import QPainter, QBrush, QColor, QFont, QFontMetricsF, QPalette
from PyQt6.QtCore import Qt, QRectF, QSize, pyqtSignal

from backend.initials import extract_initials, spread_initials
from backend.color import color_for
from backend.config import (
    INITIALS_FONT_FAMILY, INITIALS_DEFAULT_BACKGROUND, INITIALS_PADDING,
    INITIALS_PADDING_THRESHOLD, INITIALS_FIT_FRACTION
)

# Text is laid out at a large size and scaled down to fit, never below the minimum factor.
BASE_FONT_PIXEL_SIZE = 1000
MINIMUM_SCALE_FACTOR = 0.005
MINIMUM_PIXEL_SIZE = max(1, int(BASE_FONT_PIXEL_SIZE * MINIMUM_SCALE_FACTOR))


class BackgroundStyle(enum.Enum):
    FIXED = "fixed"
    RANDOM = "random"
    CUSTOM = "custom"


class Shape(enum.Enum):
    RECTANGLE = "rectangle"
    CIRCLE = "circle"


def to_qcolor(rgb):
    return QColor.fromRgbF(rgb.red, rgb.green, rgb.blue)


class InitialsWidget(QWidget):
    """
    Paints the initials of a name on top of a background that fills the widget.
    The text shrinks to fit the available width and is padded once the widget is large enough.

    background may be None (the configured default color), a color, BackgroundStyle.RANDOM
    for a color derived from the name, or a callable taking the paint rect and returning a brush.
    """
    textChanged = pyqtSignal(str)
    initialsChanged = pyqtSignal(str)

    def __init__(self, text="", font_weight=None, background=None, shape=Shape.RECTANGLE, parent=None):
        super().__init__(parent)
        self._text = ""
        self._seed = ""
        self._initials = ""
        self._font_weight = font_weight
        self._shape = Shape(shape)
        self._default_foreground = True
        self._background_style = BackgroundStyle.FIXED
        self._background_color = QColor(INITIALS_DEFAULT_BACKGROUND)
        self._background_factory = None

        if background is None or background is BackgroundStyle.FIXED:
            self.set_fixed_background(INITIALS_DEFAULT_BACKGROUND)
        elif background is BackgroundStyle.RANDOM:
            self.set_random_background()
        elif background is BackgroundStyle.CUSTOM:
            raise ValueError("BackgroundStyle.CUSTOM needs a factory; pass the callable as background.")
        elif callable(background):
            self.set_background_factory(background)
        else:
            self.set_fixed_background(background)

        self.setText(text)

    @classmethod
    def from_initials(cls, initials, font_weight=None, background=None, shape=Shape.RECTANGLE, parent=None):
        """Builds a widget from ready-made initials such as "TZ"; the initials also seed the random color."""
        widget = cls(font_weight=font_weight, background=background, shape=shape, parent=parent)
        widget.setInitials(initials)
        return widget

    # Text

    def text(self):
        return self._text

    def initials(self):
        return self._initials

    def seed(self):
        return self._seed

    def setText(self, text):
        self._apply_text(text, text)

    def setInitials(self, initials):
        self._apply_text(spread_initials(initials), initials)

    def _apply_text(self, text, seed):
        text_changed = text != self._text
        previous_initials = self._initials
        self._text = text
        self._seed = seed
        self._initials = extract_initials(text)
        self.update()
        if text_changed:
            self.textChanged.emit(text)
        if self._initials != previous_initials:
            logging.debug(f"Initials changed from {previous_initials!r} to {self._initials!r}")
            self.initialsChanged.emit(self._initials)

    # Styling

    def background_style(self):
        return self._background_style

    def background_color(self):
        return QColor(self._background_color)

    def set_fixed_background(self, color):
        try:
            qcolor = QColor(color)
        except TypeError:
            qcolor = QColor()
        if not qcolor.isValid():
            logging.error(f"Invalid background color: {color!r}")
            raise ValueError(f"Invalid background color: {color!r}")
        self._background_style = BackgroundStyle.FIXED
        self._background_color = qcolor
        self._background_factory = None
        logging.debug(f"Background set to fixed color {qcolor.name()}")
        self.update()

    def set_random_background(self):
        self._background_style = BackgroundStyle.RANDOM
        self._background_factory = None
        logging.debug("Background set to random color")
        self.update()

    def set_background_factory(self, factory):
        if not callable(factory):
            raise TypeError("Background factory must be callable.")
        self._background_style = BackgroundStyle.CUSTOM
        self._background_factory = factory
        logging.debug(f"Background set to custom factory {factory!r}")
        self.update()

    def shape(self):
        return self._shape

    def set_shape(self, shape):
        self._shape = Shape(shape)
        self.update()

    def default_foreground(self):
        return self._default_foreground

    def set_default_foreground(self, enabled):
        self._default_foreground = bool(enabled)
        self.update()

    def font_weight(self):
        return self._font_weight

    def set_font_weight(self, weight):
        self._font_weight = weight
        self.update()

    # Layout and painting

    def sizeHint(self):
        return QSize(40, 40)

    def background_brush(self, rect):
        if self._background_style is BackgroundStyle.RANDOM:
            return QBrush(to_qcolor(color_for(self._seed)))
        if self._background_style is BackgroundStyle.CUSTOM:
            brush = self._background_factory(rect)
            return brush if isinstance(brush, QBrush) else QBrush(brush)
        return QBrush(self._background_color)

    def foreground_color(self):
        if self._default_foreground:
            return QColor(Qt.GlobalColor.white)
        return self.palette().color(QPalette.ColorRole.WindowText)

    def content_rect(self):
        # Each axis is padded only when that side is past the threshold, and never below zero size.
        width, height = self.width(), self.height()
        pad_x = min(INITIALS_PADDING, width / 2) if width > INITIALS_PADDING_THRESHOLD else 0
        pad_y = min(INITIALS_PADDING, height / 2) if height > INITIALS_PADDING_THRESHOLD else 0
        return QRectF(self.rect()).adjusted(pad_x, pad_y, -pad_x, -pad_y)

    def base_font(self):
        font = QFont(INITIALS_FONT_FAMILY)
        font.setWeight(self._font_weight if self._font_weight is not None else QFont.Weight.Normal)
        font.setPixelSize(BASE_FONT_PIXEL_SIZE)
        return font

    def fitted_font(self, rect):
        """
        Returns the largest font (up to BASE_FONT_PIXEL_SIZE) that keeps the initials on one line inside rect.
        """
        font = self.base_font()
        if not self._initials:
            return font
        metrics = QFontMetricsF(font)
        text_width = metrics.horizontalAdvance(self._initials)
        text_height = metrics.height()
        available_width = max(rect.width(), 0.0) * INITIALS_FIT_FRACTION

        scale = 1.0
        if text_width > 0:
            scale = min(scale, available_width / text_width)
        if text_height > 0:
            scale = min(scale, max(rect.height(), 0.0) / text_height)
        scale = max(scale, MINIMUM_SCALE_FACTOR)

        size = max(int(BASE_FONT_PIXEL_SIZE * scale), MINIMUM_PIXEL_SIZE)
        font.setPixelSize(size)
        # Hinting makes glyph widths slightly non-linear, so step down until it fits.
        while size > MINIMUM_PIXEL_SIZE and QFontMetricsF(font).horizontalAdvance(self._initials) > available_width:
            size -= 1
            font.setPixelSize(size)
        return font

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        bounds = QRectF(self.rect())

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(self.background_brush(bounds))
        if self._shape is Shape.CIRCLE:
            side = min(bounds.width(), bounds.height())
            circle = QRectF(0, 0, side, side)
            circle.moveCenter(bounds.center())
            painter.drawEllipse(circle)
        else:
            painter.drawRect(bounds)

        if self._initials:
            rect = self.content_rect()
            painter.setFont(self.fitted_font(rect))
            painter.setPen(self.foreground_color())
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, self._initials)
        painter.end()
