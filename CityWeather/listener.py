"""Render boundary - the only way the core reports anything to a front end."""
from typing import List
from weather_data import SuggestionResult, SearchOutcome


class SearchListener:
    """
    Receives everything a front end needs to draw.

    Methods are no-ops by default so front ends override only what they show.
    """

    def on_suggestions(self, result: SuggestionResult) -> None:
        pass

    def on_search_result(self, outcome: SearchOutcome) -> None:
        pass

    def on_history_changed(self, history: List[str]) -> None:
        pass

    def on_status(self, message: str) -> None:
        """Progress notice while a search is in flight."""
        pass

    def on_theme_changed(self, theme: str) -> None:
        pass


class RecordingListener(SearchListener):
    """Keeps every notification in order, for tests and scripted use."""

    def __init__(self):
        self.suggestions: List[SuggestionResult] = []
        self.results: List[SearchOutcome] = []
        self.histories: List[List[str]] = []
        self.statuses: List[str] = []
        self.themes: List[str] = []

    def on_suggestions(self, result):
        self.suggestions.append(result)

    def on_search_result(self, outcome):
        self.results.append(outcome)

    def on_history_changed(self, history):
        self.histories.append(list(history))

    def on_status(self, message):
        self.statuses.append(message)

    def on_theme_changed(self, theme):
        self.themes.append(theme)
