"""Main application window for RadialClock."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QApplication, QMainWindow

from .audio.sounds import ClockAudio
from .settings import Settings, load_settings, save_settings
from .timer.curves import format_seconds
from .timer.engine import ClockEngine, ClockState
from .timer.frame_clock import FrameClock
from .timer.sinks import AudioSink
from .ui.clock_widget import ClockWidget
from .ui.styles import build_stylesheet

logger = logging.getLogger(__name__)


STATUS_MESSAGES: dict[ClockState, str] = {
    ClockState.READY:   "Ready: set a time and press Space",
    ClockState.RUNNING: "Running",
    ClockState.PAUSED:  "Paused. Press Space to resume",
    ClockState.ENDED:   "Time's up! Press Space to reset",
}


class ClockApp(QMainWindow):
    """Main application window.

    *audio* replaces the default ``ClockAudio`` sink (tests pass a fake).
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        audio: AudioSink | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("RadialClock")
        self.setMinimumSize(380, 520)

        self._geometry_save_timer = QTimer(self)
        self._geometry_save_timer.setSingleShot(True)
        self._geometry_save_timer.setInterval(500)
        self._geometry_save_timer.timeout.connect(self._save_geometry)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()
        s = self._settings

        # ── collaborators ─────────────────────────────────────────────
        self._clock_widget = ClockWidget(
            self, small_step=s.small_step, large_step=s.large_step,
        )
        self.setCentralWidget(self._clock_widget)

        if audio is None:
            audio = ClockAudio(self)
        self._audio = audio
        self._apply_audio_preferences()

        self._engine = ClockEngine(
            self._clock_widget,
            self._clock_widget,
            self._audio,
            self,
            duration=s.default_duration,
            warn_window=s.warn_window,
            max_indicator=s.max_indicator,
        )
        self._frame_clock = FrameClock(self)
        self._applied_default_duration = s.default_duration

        # ── wiring ────────────────────────────────────────────────────
        self._frame_clock.frame.connect(self._engine.tick)
        self._engine.state_changed.connect(self._on_state_changed)
        self._engine.time_up.connect(self._on_time_up)
        self._clock_widget.toggle_requested.connect(self._engine.advance)
        self._clock_widget.reset_requested.connect(self._engine.reset)
        self._clock_widget.duration_text_entered.connect(
            self._engine.set_duration_from_text
        )
        self._clock_widget.adjust_requested.connect(
            self._engine.adjust_queued_duration
        )

        self.setStyleSheet(build_stylesheet())
        self._build_menu_bar()
        self._on_state_changed(self._engine.state)
        self._restore_geometry()
        if s.always_on_top:
            self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)

        self._frame_clock.start()
        logger.info(
            "RadialClock ready (%s s, pitch ramp in last %s s)",
            format_seconds(self._engine.duration),
            format_seconds(self._engine.warn_window),
        )

    # ── accessors ─────────────────────────────────────────────────────

    @property
    def engine(self) -> ClockEngine:
        return self._engine

    @property
    def clock_widget(self) -> ClockWidget:
        return self._clock_widget

    @property
    def frame_clock(self) -> FrameClock:
        return self._frame_clock

    # ══════════════════════════════════════════════════════════════════
    #  MENU BAR
    # ══════════════════════════════════════════════════════════════════

    def _build_menu_bar(self) -> None:
        menu_bar = self.menuBar()

        prefs_action = QAction("Preferences…", self)
        prefs_action.setMenuRole(QAction.MenuRole.PreferencesRole)
        prefs_action.setShortcut(QKeySequence("Ctrl+,"))
        prefs_action.triggered.connect(self._open_settings)

        quit_action = QAction("Quit RadialClock", self)
        quit_action.setMenuRole(QAction.MenuRole.QuitRole)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        quit_action.triggered.connect(self.close)

        app_menu = menu_bar.addMenu("RadialClock")
        app_menu.addAction(prefs_action)
        app_menu.addAction(quit_action)

        # ── Timer menu ───────────────────────────────────────────────
        timer_menu = menu_bar.addMenu("Timer")

        toggle_action = QAction("Start / Pause", self)
        toggle_action.triggered.connect(self._engine.advance)
        timer_menu.addAction(toggle_action)

        reset_action = QAction("Reset", self)
        reset_action.setShortcut(QKeySequence("Ctrl+R"))
        reset_action.triggered.connect(self._engine.reset)
        timer_menu.addAction(reset_action)

        # ── View menu ────────────────────────────────────────────────
        view_menu = menu_bar.addMenu("View")

        self._aot_action = QAction("Always on Top", self)
        self._aot_action.setCheckable(True)
        self._aot_action.setChecked(self._settings.always_on_top)
        self._aot_action.triggered.connect(self._toggle_always_on_top)
        view_menu.addAction(self._aot_action)

    # ══════════════════════════════════════════════════════════════════
    #  ENGINE SIGNALS
    # ══════════════════════════════════════════════════════════════════

    def _on_state_changed(self, state: ClockState) -> None:
        self._clock_widget.apply_state(state)
        self.statusBar().showMessage(STATUS_MESSAGES[state])

    def _on_time_up(self) -> None:
        QApplication.alert(self)

    # ══════════════════════════════════════════════════════════════════
    #  SETTINGS
    # ══════════════════════════════════════════════════════════════════

    def _open_settings(self) -> None:
        """Open the settings dialog and apply any changes."""
        from .ui.settings_dialog import SettingsDialog

        dlg = SettingsDialog(
            self._settings,
            parent=self,
            sound_preview_callback=self._apply_audio_preferences,
        )
        dlg.exec()
        self._apply_settings()

    def _apply_settings(self) -> None:
        """Push current Settings into the engine and audio."""
        s = self._settings

        self._engine.set_warn_window(s.warn_window)
        self._engine.max_indicator = s.max_indicator
        # Retime a waiting clock only when the default itself changed; a
        # duration the user typed survives an untouched dialog.
        if (
            s.default_duration != self._applied_default_duration
            and self._engine.state == ClockState.READY
        ):
            self._engine.set_duration_from_text(f"{s.default_duration:g}")
            self._applied_default_duration = s.default_duration

        self._apply_audio_preferences()
        if s.always_on_top != self._aot_action.isChecked():
            self._aot_action.setChecked(s.always_on_top)
            self._apply_always_on_top(s.always_on_top)

    def _apply_audio_preferences(self) -> None:
        if isinstance(self._audio, ClockAudio):
            self._audio.set_volume(self._settings.sound_volume)
            self._audio.set_enabled(self._settings.sound_enabled)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW STATE
    # ══════════════════════════════════════════════════════════════════

    def _restore_geometry(self) -> None:
        """Restore window position and size from settings."""
        s = self._settings
        if s.window_x is not None and s.window_y is not None:
            self.move(s.window_x, s.window_y)
        if s.window_width and s.window_height:
            self.resize(s.window_width, s.window_height)

    def _save_geometry(self) -> None:
        """Persist current window geometry to settings."""
        if not self.isVisible():
            return
        pos = self.pos()
        size = self.size()
        self._settings.window_x = pos.x()
        self._settings.window_y = pos.y()
        self._settings.window_width = size.width()
        self._settings.window_height = size.height()
        save_settings(self._settings)

    def _schedule_geometry_save(self) -> None:
        """Debounce geometry saves; restart 500ms timer on each move/resize."""
        if hasattr(self, "_geometry_save_timer"):
            self._geometry_save_timer.start()

    def _toggle_always_on_top(self) -> None:
        new_val = not self._settings.always_on_top
        self._settings.always_on_top = new_val
        save_settings(self._settings)
        self._aot_action.setChecked(new_val)
        self._apply_always_on_top(new_val)

    def _apply_always_on_top(self, on_top: bool) -> None:
        self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, on_top)
        self.show()  # Required: changing window flags hides the window

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._save_geometry()
        self._frame_clock.stop()
        self._audio.stop()
        event.accept()

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._schedule_geometry_save()

    def moveEvent(self, event) -> None:  # type: ignore[override]
        super().moveEvent(event)
        self._schedule_geometry_save()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Space toggles the clock; Escape quits."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            if not self._clock_widget.duration_input.hasFocus():
                self._engine.advance()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            event.accept()
            self.close()
            return
        super().keyPressEvent(event)
