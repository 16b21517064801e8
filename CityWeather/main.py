"""Console front end for the city weather lookup widget."""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from config import AppConfig, load_config
from layout import format_history_lines, format_outcome_lines, format_suggestion_lines
from listener import SearchListener
from weather_data import SearchOutcome, SuggestionResult
from widget import WeatherWidget, build_widget

HELP_TEXT = """Commands:
  <city>     search by name
  ?<text>    show suggestions for partial text
  #<n>       search suggestion n
  (empty)    search the first suggestion, if any are shown
  !<n>       re-run history entry n
  @          use my location
  history    show history
  clear      clear history
  theme      toggle light/dark theme
  quit       exit"""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("city-weather", description="Current weather by city name")
    parser.add_argument("query", nargs="*", help="Search once for this city and exit")
    parser.add_argument("--log-file", default=None, help="Log file (overrides WEATHER_LOG_FILE)")
    parser.add_argument("--db", default=None, help="History database (overrides WEATHER_DB)")
    parser.add_argument("--here", action="store_true", help="Search once for the configured location and exit")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: str, verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(log_level if verbose else logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            console,
            logging.FileHandler(log_file)
        ]
    )


class ConsoleListener(SearchListener):
    """Prints everything the widget reports."""

    def __init__(self, out=None):
        self.out = out or sys.stdout
        self.history: List[str] = []
        self.theme = "light"

    def show(self, lines: List[str]) -> None:
        for line in lines:
            print(line, file=self.out)

    def on_suggestions(self, result: SuggestionResult) -> None:
        if result.status == SuggestionResult.LOADING:
            return
        self.show(format_suggestion_lines(result))

    def on_search_result(self, outcome: SearchOutcome) -> None:
        self.show([""] + format_outcome_lines(outcome) + [""])

    def on_history_changed(self, history: List[str]) -> None:
        self.history = list(history)

    def on_status(self, message: str) -> None:
        self.show([message])

    def on_theme_changed(self, theme: str) -> None:
        self.theme = theme


async def handle_command(widget: WeatherWidget, listener: ConsoleListener, line: str) -> bool:
    """Run one console command. Returns False when the user asked to quit."""
    line = line.strip()
    if line in ("quit", "exit"):
        return False
    if line in ("help", "h"):
        print(HELP_TEXT, file=listener.out)
    elif line == "history":
        listener.show(format_history_lines(listener.history))
    elif line == "clear":
        widget.clear_history()
        listener.show(["History cleared"])
    elif line == "theme":
        listener.show([f"Theme: {widget.toggle_theme()}"])
    elif line == "@":
        await widget.use_my_location()
    elif line.startswith("?"):
        widget.input_changed(line[1:])
        await widget.suggestions.wait_idle()
    elif line.startswith("#") and line[1:].isdigit():
        if await widget.choose_suggestion(int(line[1:]) - 1) is None:
            listener.show(["No such suggestion"])
    elif line.startswith("!") and line[1:].isdigit():
        newest_first = list(reversed(listener.history))
        index = int(line[1:]) - 1
        if 0 <= index < len(newest_first):
            await widget.choose_history(newest_first[index])
        else:
            listener.show(["No such history entry"])
    elif not line:
        latest = widget.suggestions.latest
        if latest is not None and latest.status == SuggestionResult.OK:
            await widget.submit("")
    else:
        await widget.search(line)
    return True


async def interactive(widget: WeatherWidget, listener: ConsoleListener) -> None:
    widget.start()
    print(HELP_TEXT, file=listener.out)
    listener.show([""] + format_history_lines(listener.history))
    while True:
        try:
            line = await asyncio.to_thread(input, "city> ")
        except EOFError:
            break
        if not await handle_command(widget, listener, line):
            break


async def run_once(widget: WeatherWidget, args: argparse.Namespace) -> int:
    widget.start()
    if args.here:
        outcome = await widget.use_my_location()
    else:
        outcome = await widget.search(" ".join(args.query))
    return 0 if outcome.ok else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config: AppConfig = load_config()
    setup_logging(args.log_file or config.log_file, args.verbose)
    if args.db:
        config.db_path = args.db
    logging.info(f"Configuration loaded: lang={config.language} db={config.db_path} "
                 f"location={'configured' if config.lat is not None else 'unset'}")

    listener = ConsoleListener()
    widget = build_widget(config, listener)

    if args.query or args.here:
        return asyncio.run(run_once(widget, args))

    try:
        asyncio.run(interactive(widget, listener))
    except KeyboardInterrupt:
        logging.info("Interrupted, exiting")
    return 0


if __name__ == "__main__":
    sys.exit(main())
