"""
Listener base class for sessions.
"""


class BaseObserver:
    """Session observer that ignores every notification. Override what you need."""

    def on_inputs_changed(self) -> None:
        pass

    def on_finished(self, finished: bool) -> None:
        pass

    def on_settings_changed(self) -> None:
        pass

    def on_data_changed(self) -> None:
        pass
