"""
cli.py - interactive dictionary console
Features:
- Menu driven add / delete / search / update of words and meanings
- Search shows up to 10 alphabetical suggestions for what was typed
- Slash commands for suggestions, tree stats, operation timings and config
- Uses Rich for tables and formatting
"""

import argparse
import logging
import shlex
import sys
from typing import List, Optional, Sequence

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from trie_dictionary.core.dictionary import Dictionary
from trie_dictionary.core.errors import DictionaryLoadError
from trie_dictionary.core.protocols import Outcome
from trie_dictionary.utils.config_manager import Config
from trie_dictionary.utils.logger_utils import Log
from trie_dictionary.utils.metrics_tracker import Metrics

MENU = (
    "Main Menu\n"
    "1. Add a word with its meaning\n"
    "2. Delete Word\n"
    "3. Search a word\n"
    "4. Update Word\n"
    "\nType /help for commands, /quit to exit"
)

HELP = (
    "/suggest <prefix>   list up to 10 words starting with prefix\n"
    "/stats              words, nodes and depth of the tree\n"
    "/timings            average time per operation\n"
    "/config [key val]   show or change a setting\n"
    "/quit               exit"
)


class CLI:
    """Command-line interface managing user interaction with one Dictionary."""

    def __init__(self, dictionary: Dictionary, cfg: Optional[Config] = None,
                 console: Optional[Console] = None):
        self.dictionary = dictionary
        self.cfg = cfg if cfg is not None else Config(path=None)
        self.console = console or Console()
        self.running = True

    def ask(self, prompt: str, default: str = "") -> str:
        return Prompt.ask(prompt, default=default, console=self.console)

    def run(self):
        """
        Main interactive loop:
        - Shows the menu and reads a choice
        - Dispatches to the menu action or slash command
        """
        self.console.rule("[bold magenta]Dictionary[/bold magenta]")
        while self.running:
            try:
                self.console.print(Panel(MENU, border_style="cyan", box=box.ROUNDED))
                choice = self.ask("[green]Choice[/green]").strip()
                if not choice:
                    continue
                if choice.startswith("/"):
                    self._handle_command(choice)
                    continue
                self._handle_choice(choice)
            except (EOFError, KeyboardInterrupt):
                self._exit()

    # MENU -------------------------------------------------------------------
    def _handle_choice(self, choice: str):
        actions = {
            "1": self._add_word,
            "2": self._delete_word,
            "3": self._search_word,
            "4": self._update_word,
        }
        action = actions.get(choice)
        if action is None:
            self.console.print("[red]Invalid choice[/red]")
            return
        action()

    def _add_word(self):
        word = self.ask("Enter a word to add")
        meaning = self.ask("Enter its meaning")
        out = self.dictionary.add(word, meaning)
        if out:
            self.console.print("[green]Word added successfully![/green]")
        else:
            self.console.print("[red]Invalid word or meaning[/red]")

    def _delete_word(self):
        word = self.ask("Enter a word to delete")
        out = self.dictionary.remove(word)
        if out.is_invalid:
            self.console.print("[red]Invalid Word[/red]")
        elif out.is_not_found:
            self.console.print(f"[yellow]'{out.word}' is not in the dictionary[/yellow]")
        else:
            self.console.print("[green]Word deleted successfully[/green]")

    def _update_word(self):
        word = self.ask("Enter a word to update")
        meaning = self.ask("Enter its meaning")
        out = self.dictionary.change(word, meaning)
        if out.is_invalid:
            self.console.print("[red]Invalid word or meaning[/red]")
        elif out.is_not_found:
            self.console.print("[yellow]Word not found[/yellow]")
        else:
            self.console.print("[green]Word updated successfully![/green]")

    def _search_word(self):
        """
        Search flow:
        typed text -> suggestions table -> optional pick -> exact lookup
        """
        typed = self.ask("Enter word").strip()
        suggestions = self.dictionary.suggest(typed)
        word = typed
        if suggestions:
            self._display_suggestions(suggestions)
            picked = self.ask("Pick # / Enter to search as typed")
            if picked.isdigit() and 1 <= int(picked) <= len(suggestions):
                word = suggestions[int(picked) - 1]
        self._show_result(self.dictionary.lookup(word))

    def _show_result(self, out: Outcome):
        if out.is_invalid:
            self.console.print("[red]Invalid word[/red]")
        elif out.is_not_found:
            self.console.print("[yellow]word not found[/yellow]")
        else:
            self.console.print(f"[bold]{out.word}[/bold]  Meaning: {out.value}")

    # DISPLAY ----------------------------------------------------------------
    def _display_suggestions(self, suggestions: List[str]):
        table = Table(title="Suggestions", box=box.SIMPLE, show_edge=False, min_width=24)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        for i, w in enumerate(suggestions, 1):
            table.add_row(str(i), w)
        self.console.print(table)

    # COMMAND HANDLING -------------------------------------------------------
    def _handle_command(self, line: str):
        try:
            p = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]Bad command:[/red] {e}")
            return
        c = p[0].lower()

        if c in ("/q", "/quit", "/exit"):
            self._exit()
        elif c == "/help":
            self.console.print(Panel(HELP, title="Commands", border_style="cyan"))
        elif c == "/suggest":
            prefix = p[1] if len(p) > 1 else ""
            found = self.dictionary.suggest(prefix)
            if found:
                self._display_suggestions(found)
            else:
                self.console.print("[dim](no suggestions)[/dim]")
        elif c == "/stats":
            self._show_stats()
        elif c == "/timings":
            self._show_timings()
        elif c == "/config":
            self._config(p[1:])
        else:
            self.console.print(f"[red]Unknown command:[/red] {line}")

    def _show_stats(self):
        s = self.dictionary.stats()
        t = Table(title="Dictionary", box=box.MINIMAL, min_width=24)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", justify="right")
        t.add_row("Words", str(s["words"]))
        t.add_row("Nodes", str(s["nodes"]))
        t.add_row("Longest word", str(s["max_depth"]))
        self.console.print(t)

    def _show_timings(self):
        snap = self.dictionary.metrics.snapshot()
        if not snap:
            self.console.print("[dim](no operations yet)[/dim]")
            return
        t = Table(title="Timings", box=box.MINIMAL, min_width=30)
        t.add_column("Operation", style="cyan")
        t.add_column("Calls", justify="right")
        t.add_column("Avg (ms)", justify="right")
        for k, v in snap.items():
            t.add_row(k, str(v["count"]), f"{v['avg'] * 1000:.3f}")
        self.console.print(t)

    def _config(self, args: List[str]):
        if not args:
            t = Table(title="Config", box=box.MINIMAL)
            t.add_column("Key", style="cyan")
            t.add_column("Value")
            for k, v in self.cfg.items():
                t.add_row(k, str(v))
            self.console.print(t)
            return
        if len(args) != 2:
            self.console.print("usage: /config [key val]")
            return
        key, val = args
        try:
            new = self.cfg.set(key, val)
        except KeyError:
            self.console.print(f"[red]No such option:[/red] {key}")
            return
        except ValueError as e:
            self.console.print(f"[red]Bad value:[/red] {e}")
            return
        if key == "max_suggestions":
            self.dictionary.max_suggestions = new
        elif key == "metrics_path":
            self.dictionary.metrics.path = new or None
        self.console.print(f"{key} = {new}")

    # EXIT -------------------------------------------------------------------
    def _exit(self):
        """Persist timings (when a metrics_path is set) and stop the loop."""
        self.console.rule("[red]Exiting[/red]")
        try:
            self.dictionary.metrics.save()
        except OSError as e:
            self.console.print(f"[red]Saving timings failed:[/red] {e}")
        self.running = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="trie-dictionary",
                                     description="Word/meaning dictionary with autocomplete")
    parser.add_argument("--dict", dest="dict_path", default=None,
                        help="dictionary file of 'word meaning' lines")
    parser.add_argument("--config", default="config.json", help="JSON config file")
    parser.add_argument("--no-load", action="store_true", help="start with an empty dictionary")
    return parser


def bootstrap(cfg: Config, dict_path: Optional[str] = None, load: bool = True,
              console: Optional[Console] = None) -> Dictionary:
    """Build the Dictionary the CLI will own and bulk load it."""
    console = console or Console()
    metrics = Metrics(cfg["metrics_path"] or None)
    dictionary = Dictionary(metrics=metrics, max_suggestions=cfg["max_suggestions"])
    if not (load and cfg["autoload"]):
        return dictionary

    path = dict_path or cfg["dictionary_path"]
    console.print("Loading dictionary. Please wait...")
    try:
        report = dictionary.load(path)
    except DictionaryLoadError as e:
        console.print(f"[red]Error:[/red] Unable to open file '{e.path}'")
        Log(cfg["log_path"], echo=False).error(str(e))
        return dictionary
    console.print(f"[dim]{report.inserted} words loaded, {len(report.skipped)} lines skipped.[/dim]")
    return dictionary


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)

    logging.basicConfig(
        level=getattr(logging, str(cfg["log_level"]).upper(), logging.INFO),
        format="[%(asctime)s] %(levelname)-7s | %(name)s: %(message)s",
    )
    Log.configure(cfg["log_path"], echo=cfg["show_timings"])

    console = Console()
    for err in cfg.errors:
        console.print(f"[yellow]Config ignored:[/yellow] {err}")
    dictionary = bootstrap(cfg, args.dict_path, load=not args.no_load, console=console)
    CLI(dictionary, cfg, console).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
