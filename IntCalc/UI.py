# UI.py
"""
PySide6 user interface for the integer calculator.

Structure
---------
- Calculator UI: main window with display and button grid
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Build window, display, layout and buttons
- Translate every button press into exactly one Event and dispatch it
- Redraw the display from Calculator.display() after each event
- Show MathEngine errors as dialogs
- Clipboard integration (Shift + clipboard button copies, plain click pastes)
- Press-and-hold repeat for digits and backspace

Responsibilities (Settings)
---------------------------
- Load current settings and their descriptions via config_manager
- Save and apply theme changes immediately

The UI never touches the calculator state directly; it only calls
dispatch(event) and display().
"""

import logging
import sys

from PySide6 import QtWidgets
from PySide6.QtCore import Qt, Signal, QTimer
from pynput.keyboard import Controller
import pyperclip

from . import error as E
from . import config_manager as config_manager
from .Dispatcher import Calculator
from .Tokens import event_from_label

logger = logging.getLogger(__name__)

COPY_BUTTON = '📋'
SETTINGS_BUTTON = '⚙'


def is_shift_pressed():
    """
    Small and simple check, whether shift is pressed or not.
    Used for the "shift to copy" setting.
    """
    keyboard_controller = Controller()
    return keyboard_controller.shift_pressed


class SettingsDialog(QtWidgets.QDialog):
    """
    Settings window. Every setting is a boolean and gets a checkbox;
    OK writes config.json through config_manager, Cancel discards.
    """

    settings_saved = Signal()  # Signal to tell the main window to update

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}  # setting key -> QCheckBox

        # --- 1. Window Setup ---
        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(300, 160)

        main_layout = QtWidgets.QVBoxLayout(self)

        # --- 2. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        # --- 3. Build Widgets ---
        for key_value, value in self.setting_value_list.items():
            if not isinstance(value, bool):
                continue
            description = self.setting_description_list.get(key_value, key_value)
            checkbox = QtWidgets.QCheckBox(description)
            checkbox.setChecked(value)
            main_layout.addWidget(checkbox)
            self.widgets[key_value] = checkbox

        # --- 4. OK / Cancel Buttons ---
        button_box = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(self.save_settings)
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self):
        for key_value, checkbox in self.widgets.items():
            self.setting_value_list[key_value] = checkbox.isChecked()

        saved_settings = config_manager.save_setting(self.setting_value_list)

        if saved_settings != {}:
            self.settings_saved.emit()
            self.accept()
        else:
            QtWidgets.QMessageBox.critical(self, "Error",
                                           f"Error 4501: {E.ERROR_MESSAGES['4501']}config.json")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"]:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QCheckBox {color: white;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class CalculatorWindow(QtWidgets.QWidget):
    # --- Class-level attributes for button hold logic ---
    initial_delay = 500
    repeat_interval = 100

    def __init__(self, calculator=None):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")

        # --- 2. Instance State ---
        self.calculator = calculator if calculator is not None else Calculator()
        self.shift_is_held = False
        self.was_held = False
        self.held_button_value = None
        self.hold_timer = QTimer(self)
        self.hold_timer.timeout.connect(self.handle_hold_tick)

        # --- 3. Window Setup ---
        self.button_objects = {}
        self.setWindowTitle("Calculator")
        self.resize(280, 380)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        expanding_policy = QtWidgets.QSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding
        )

        # --- 4. Display Setup ---
        self.display = QtWidgets.QLineEdit(self.calculator.display())
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.display.setReadOnly(True)
        font = self.display.font()
        font.setPointSize(28)
        self.display.setFont(font)
        self.display.setSizePolicy(expanding_policy)
        main_v_layout.addWidget(self.display, 1)

        # --- 5. Button Grid Setup ---
        button_container = QtWidgets.QWidget()
        main_v_layout.addWidget(button_container, 4)
        button_grid = QtWidgets.QGridLayout(button_container)
        button_grid.setSpacing(0)
        button_grid.setContentsMargins(0, 0, 0, 0)

        # (text, row, column)
        self.buttons = [
            ('C', 0, 0), ('±', 0, 1), ('<', 0, 2), ('/', 0, 3),
            ('7', 1, 0), ('8', 1, 1), ('9', 1, 2), ('*', 1, 3),
            ('4', 2, 0), ('5', 2, 1), ('6', 2, 2), ('-', 2, 3),
            ('1', 3, 0), ('2', 3, 1), ('3', 3, 2), ('+', 3, 3),
            (SETTINGS_BUTTON, 4, 0), ('0', 4, 1), (COPY_BUTTON, 4, 2), ('=', 4, 3),
        ]

        # Buttons that support "press and hold"
        HOLD_BUTTONS = ['0', '1', '2', '3', '4', '5', '6', '7', '8', '9', '<']

        for text, row, col in self.buttons:
            button = QtWidgets.QPushButton(text)
            button.setSizePolicy(expanding_policy)

            if text == SETTINGS_BUTTON:
                button.clicked.connect(self.open_settings)
            elif text == '=':
                button.setStyleSheet("background-color: #007bff; color: white; font-weight: bold;")
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))
            elif text in HOLD_BUTTONS:
                # Use press/release signals for hold logic
                button.pressed.connect(lambda val=text: self.handle_button_pressed_hold(val))
                button.released.connect(self.handle_button_released_hold)
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_clicked_hold(val))
            else:
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))

            button_grid.addWidget(button, row, col)
            self.button_objects[text] = button

        self.update_darkmode()

    # --- Button Hold Logic ---
    def handle_button_pressed_hold(self, value):
        if not self.setting_value_list["hold_repeat"]:
            return
        self.was_held = False
        self.held_button_value = value
        self.hold_timer.setInterval(self.initial_delay)
        self.hold_timer.start()

    def handle_button_released_hold(self):
        self.hold_timer.stop()
        self.held_button_value = None

    def handle_button_clicked_hold(self, value):
        # A click that ends a hold has already been repeated by the timer
        if not self.was_held:
            self.handle_button_press(value)
        self.was_held = False

    def handle_hold_tick(self):
        self.was_held = True
        if self.hold_timer.interval() == self.initial_delay:
            self.hold_timer.setInterval(self.repeat_interval)

        if self.held_button_value:
            self.handle_button_press(self.held_button_value)

    # --- Key Event Handlers ---
    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = True
        elif event.text():
            self.handle_button_press(self.key_to_label(event))
            return
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = False
        super().keyReleaseEvent(event)

    @staticmethod
    def key_to_label(event):
        if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            return '='
        if event.key() == Qt.Key.Key_Backspace:
            return '<'
        if event.key() == Qt.Key.Key_Escape:
            return 'C'
        return event.text()

    # --- Input Handling ---
    def handle_button_press(self, value):
        if value == COPY_BUTTON:
            self.handle_clipboard()
        else:
            self.send(event_from_label(value))
        self.refresh_display()

    def handle_clipboard(self):
        shift = self.shift_is_held or is_shift_pressed()
        if shift or not self.setting_value_list["shift_to_copy"]:
            pyperclip.copy(self.calculator.display())
            return

        # Paste: replay every character as if its button had been pressed
        for character in pyperclip.paste().strip():
            if not self.send(event_from_label(character)):
                break

    def send(self, event):
        """Dispatch one event; returns False if the calculation failed."""
        try:
            self.calculator.dispatch(event)
        except E.MathError as e:
            self.show_error(e)
            return False
        return True

    def refresh_display(self):
        self.display.setText(self.calculator.display())

    # --- Error Box ---
    def show_error(self, error_obj):
        error_box = QtWidgets.QMessageBox(self)
        error_box.setIcon(QtWidgets.QMessageBox.Critical)
        error_box.setWindowTitle("Calculation error")
        error_box.setText(E.describe(error_obj))
        error_box.setInformativeText(f"Details: {error_obj.message}\nEquation: {error_obj.equation}")
        error_box.setStandardButtons(QtWidgets.QMessageBox.Ok)
        error_box.setStyleSheet(self.get_message_box_stylesheet())
        error_box.exec()

    def get_message_box_stylesheet(self):
        if self.setting_value_list["darkmode"]:
            return """
                QMessageBox {
                    background-color: #121212;
                    color: white;
                }
                QLabel {
                    color: white;
                }
                QPushButton {
                    background-color: #2e2e2e;
                    color: white;
                    border: 1px solid #444444;
                    padding: 5px 15px;
                }
            """
        return ""

    # --- Theme / Settings ---
    def update_darkmode(self):
        if self.setting_value_list["darkmode"]:
            for text, button in self.button_objects.items():
                if text != '=':  # Keep the "=" button blue
                    button.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
            self.setStyleSheet("background-color: #121212;")
            self.display.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
        else:
            for text, button in self.button_objects.items():
                if text != '=':
                    button.setStyleSheet("font-weight: normal;")
            self.setStyleSheet("")
            self.display.setStyleSheet("font-weight: bold;")

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()

        # Reload settings after the dialog closes so changes apply at once
        self.setting_value_list = config_manager.load_setting_value("all")
        logging.getLogger().setLevel(logging.DEBUG if self.setting_value_list["debug"] else logging.INFO)
        self.update_darkmode()


def main():
    app = QtWidgets.QApplication(sys.argv)
    window = CalculatorWindow()
    window.show()
    sys.exit(app.exec())
