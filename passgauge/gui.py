# passgauge/gui.py
# PassGauge GUI: live strength meter with debounced evaluation

import sys
import logging
from functools import partial

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QApplication, QWidget, QHBoxLayout, QVBoxLayout, QLabel, QLineEdit,
    QPushButton, QTextEdit, QGroupBox, QProgressBar, QListWidget,
    QListWidgetItem, QMessageBox,
)

from passgauge.config import DEFAULTS, clamp_input, load_config
from passgauge.crack_time import estimate_time_to_crack
from passgauge.evaluator import CRITERIA_LABELS, StrengthLevel, analyze
from passgauge.generator import generate_password

logger = logging.getLogger(__name__)

LEVEL_COLORS = {
    StrengthLevel.EMPTY: "#adb5bd",
    StrengthLevel.VERY_WEAK: "#e63946",
    StrengthLevel.WEAK: "#e63946",
    StrengthLevel.MEDIUM: "#ff9e00",
    StrengthLevel.STRONG: "#2a9d8f",
    StrengthLevel.VERY_STRONG: "#1b7f3b",
}

# ---------------- UI building helpers ----------------

def make_input_group():
    box = QGroupBox("Password")
    layout = QHBoxLayout()
    box.setLayout(layout)

    input_pw = QLineEdit()
    input_pw.setEchoMode(QLineEdit.Password)
    input_pw.setPlaceholderText("Type or paste a password")

    btn_toggle = QPushButton("Show")
    btn_generate = QPushButton("Generate")

    layout.addWidget(input_pw, 1)
    layout.addWidget(btn_toggle)
    layout.addWidget(btn_generate)

    return {
        "widget": box,
        "input_pw": input_pw,
        "btn_toggle": btn_toggle,
        "btn_generate": btn_generate,
    }


def make_meter_group():
    box = QGroupBox("Strength")
    layout = QVBoxLayout()
    box.setLayout(layout)

    bar = QProgressBar()
    bar.setRange(0, 100)
    bar.setTextVisible(False)

    lbl_level = QLabel()
    lbl_score = QLabel()
    lbl_crack = QLabel()
    list_criteria = QListWidget()

    layout.addWidget(bar)
    layout.addWidget(lbl_level)
    layout.addWidget(lbl_score)
    layout.addWidget(lbl_crack)
    layout.addWidget(QLabel("Criteria:"))
    layout.addWidget(list_criteria)

    return {
        "widget": box,
        "bar": bar,
        "lbl_level": lbl_level,
        "lbl_score": lbl_score,
        "lbl_crack": lbl_crack,
        "list_criteria": list_criteria,
    }


def make_report_group():
    box = QGroupBox("Analysis")
    layout = QVBoxLayout()
    box.setLayout(layout)

    txt_feedback = QTextEdit()
    txt_feedback.setReadOnly(True)
    txt_suggestions = QTextEdit()
    txt_suggestions.setReadOnly(True)

    layout.addWidget(QLabel("Feedback:"))
    layout.addWidget(txt_feedback)
    layout.addWidget(QLabel("Suggestions:"))
    layout.addWidget(txt_suggestions)

    return {
        "widget": box,
        "txt_feedback": txt_feedback,
        "txt_suggestions": txt_suggestions,
    }


class PassGaugeGUI(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("PassGauge — Password Strength Checker")
        self.setMinimumSize(860, 480)

        self.cfg = load_config()
        self.generated_length = int(self.cfg.get("generated_length", DEFAULTS["generated_length"]))

        # only the latest text is analyzed once typing pauses
        self.debounce = QTimer(self)
        self.debounce.setSingleShot(True)
        self.debounce.setInterval(int(self.cfg.get("debounce_ms", DEFAULTS["debounce_ms"])))
        self.debounce.timeout.connect(self.refresh)

        root = QVBoxLayout()
        self.setLayout(root)

        inp = make_input_group()
        meter = make_meter_group()
        report = make_report_group()

        body = QHBoxLayout()
        body.addWidget(meter["widget"], 1)
        body.addWidget(report["widget"], 1)
        root.addWidget(inp["widget"])
        root.addLayout(body)

        inp["input_pw"].textChanged.connect(self.on_password_changed)
        inp["btn_toggle"].clicked.connect(partial(self.on_toggle_visibility, inp))
        inp["btn_generate"].clicked.connect(partial(self.on_generate_click, inp))

        self.inp = inp
        self.meter = meter
        self.report = report
        self.reset()

    # ----------------- Input actions -----------------
    def on_password_changed(self, _text: str):
        self.debounce.start()

    def on_toggle_visibility(self, inp, show=None):
        field = inp["input_pw"]
        if show is None:
            show = field.echoMode() == QLineEdit.Password
        field.setEchoMode(QLineEdit.Normal if show else QLineEdit.Password)
        inp["btn_toggle"].setText("Hide" if show else "Show")

    def on_generate_click(self, inp):
        try:
            pw = generate_password(self.generated_length)
        except ValueError as e:
            logger.warning("Password generation failed: %s", e)
            QMessageBox.warning(self, "Generator", f"Cannot generate password: {e}")
            return
        field = inp["input_pw"]
        field.setText(pw)
        self.on_toggle_visibility(inp, show=True)
        self.debounce.stop()
        self.refresh()
        field.selectAll()

    # ----------------- Display -----------------
    def reset(self):
        self.meter["bar"].setValue(0)
        self._set_bar_color(StrengthLevel.EMPTY)
        self.meter["lbl_level"].setText("Strength: waiting for input...")
        self.meter["lbl_score"].setText("Score: 0 / 100")
        self.meter["lbl_crack"].setText(f"Time to crack: {estimate_time_to_crack('', 0)}")
        self.meter["list_criteria"].clear()
        self.report["txt_feedback"].setPlainText("Detailed analysis appears here once you start typing.")
        self.report["txt_suggestions"].setPlainText("Suggestions to improve your password appear here.")

    def refresh(self):
        pw = self.inp["input_pw"].text()
        if pw == "":
            self.reset()
            return

        pw = clamp_input(pw, self.cfg)
        result = analyze(pw)

        self.meter["bar"].setValue(result.score)
        self._set_bar_color(result.level)
        self.meter["lbl_level"].setText(f"Strength: {result.level.label}")
        self.meter["lbl_score"].setText(f"Score: {result.score} / 100")
        self.meter["lbl_crack"].setText(f"Time to crack: {estimate_time_to_crack(pw, result.score)}")

        criteria = self.meter["list_criteria"]
        criteria.clear()
        for name, met in result.criteria:
            criteria.addItem(QListWidgetItem(f"{'✓' if met else '✗'}  {CRITERIA_LABELS[name]}"))

        self.report["txt_feedback"].setPlainText("\n".join("• " + line for line in result.feedback))
        self.report["txt_suggestions"].setPlainText("\n".join(result.suggestions))

    def _set_bar_color(self, level: StrengthLevel):
        color = LEVEL_COLORS[level]
        self.meter["bar"].setStyleSheet(f"QProgressBar::chunk {{ background-color: {color}; }}")


def main():
    logging.basicConfig(level=logging.WARNING)
    app = QApplication(sys.argv)
    gui = PassGaugeGUI()
    gui.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
