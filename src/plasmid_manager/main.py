#!/usr/bin/env python3
"""
Main module for plasmid manager.

This module provides the interactive menu shell and the command line entry
point. The shell is the only place that turns core errors into messages for
the user.
"""

import sys
from pathlib import Path
from typing import List, Optional, TextIO
import argparse

from loguru import logger

from . import __version__
from .config import PlasmidConfig, LOG_LEVELS
from .core.registry import Plasmid
from .core.parser import PlasmidCSVParser
from .core.report import PlasmidReportWriter
from .exceptions import PlasmidError, NotFoundError, InvalidLengthError


MENU = """
--- Plasmid Manager Menu ---
1) Add gene at position
2) Delete gene at position
3) Print plasmid contents
4) Print gene details from position
5) Design PCR primers for gene
6) Save to file
7) Load plasmid from CSV file (name,sequence,function)
8) Edit gene data
0) Exit"""


def setup_logging(log_level: str = "INFO") -> None:
    """Setup logging configuration."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format="{time:YYYY-MM-DD HH:mm:ss} - {name} - {level} - {message}",
    )


class PlasmidShell:
    """Interactive menu over a single plasmid."""

    def __init__(
        self,
        plasmid: Optional[Plasmid] = None,
        config: Optional[PlasmidConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        """
        Initialize shell.

        Args:
            plasmid: Plasmid to operate on (a new empty one by default)
            config: Configuration for loading and saving
            stdin: Stream answers are read from
            stdout: Stream menus and messages are written to
        """
        self.plasmid = plasmid if plasmid is not None else Plasmid()
        self.config = config if config is not None else PlasmidConfig()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.report_writer = PlasmidReportWriter(
            name_width=self.config.name_width,
            encoding=self.config.encoding
        )

        self._actions = {
            "1": self.add_gene,
            "2": self.delete_gene,
            "3": self.print_plasmid,
            "4": self.print_gene_info,
            "5": self.design_pcr,
            "6": self.save,
            "7": self.load,
            "8": self.edit_gene,
        }

    def run(self) -> None:
        """Show the menu until the user exits or input ends."""
        while True:
            self.write(MENU)
            choice = self.ask("Choice: ")

            if choice is None:
                break
            if choice == "0":
                self.write("Exiting program.")
                break

            action = self._actions.get(choice)
            if action is None:
                self.write("Invalid choice.")
                continue

            try:
                action()
            except EOFError:
                break

    def write(self, text: str = "") -> None:
        """Write one line of output."""
        print(text, file=self.stdout)

    def ask(self, prompt: str) -> Optional[str]:
        """Prompt for one line of input; None at end of input."""
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def ask_text(self, prompt: str) -> str:
        answer = self.ask(prompt)
        if answer is None:
            raise EOFError
        return answer

    def ask_int(self, prompt: str) -> Optional[int]:
        answer = self.ask_text(prompt)
        try:
            return int(answer)
        except ValueError:
            self.write("Invalid number.")
            return None

    def add_gene(self) -> None:
        name = self.ask_text("Gene name: ")
        sequence = self.ask_text("Sequence (5'-3'): ")
        function = self.ask_text("Function: ")
        position = self.ask_int("Position in plasmid: ")
        if position is None:
            return

        try:
            self.plasmid.add_gene(name, sequence, function, position)
            self.write("Gene added.")
        except PlasmidError as e:
            self.write(f"Error adding gene: {e}")

    def delete_gene(self) -> None:
        position = self.ask_int("Gene position to delete: ")
        if position is None:
            return

        try:
            gene = self.plasmid.delete_gene_at(position)
            self.write(f"Gene '{gene.name}' deleted.")
        except NotFoundError:
            self.write(f"No gene at position {position}.")

    def print_plasmid(self) -> None:
        if self.plasmid.is_empty:
            self.write("Plasmid is empty.")
            return

        self.write("Plasmid contents:")
        for index, gene in self.plasmid.enumerate():
            self.write(f" {index:2d}: {gene.name}")

    def print_gene_info(self) -> None:
        position = self.ask_int("Gene position: ")
        if position is None or not self._check_position(position):
            return

        gene = self.plasmid.gene_at(position)
        self.write(f"Gene information at position {position}:")
        self.write(f" Name: {gene.name}")
        self.write(f" Sequence: {gene.sequence}")
        self.write(f" Function: {gene.function}")

    def design_pcr(self) -> None:
        position = self.ask_int("Gene position: ")
        if position is None:
            return
        primer_length = self.ask_int("Primer length: ")
        if primer_length is None or not self._check_position(position):
            return

        try:
            pair = self.plasmid.design_primers(position, primer_length)
        except InvalidLengthError as e:
            self.write(f"Invalid primer length (max {e.max_length}).")
            return

        self.write(
            f"PCR design for gene '{pair.gene_name}' "
            f"(position {position}, length {pair.primer_length}):"
        )
        self.write(f" Forward primer: {pair.forward}")
        self.write(f" Reverse primer: {pair.reverse}")

    def save(self) -> None:
        filename = self.ask_text("File name (format .txt): ")
        try:
            self.report_writer.write(self.plasmid, Path(filename))
            self.write(f"Plasmid saved to {filename}")
        except PlasmidError as e:
            logger.error(f"Save failed: {e}")
            self.write("Error saving!")

    def load(self) -> None:
        filename = self.ask_text("CSV file name to load: ")
        try:
            PlasmidCSVParser(Path(filename), encoding=self.config.encoding).load_into(self.plasmid)
            self.write(f"Plasmid loaded from file {filename}")
        except PlasmidError as e:
            logger.error(f"Load failed: {e}")
            self.write("Error loading file.")

    def edit_gene(self) -> None:
        position = self.ask_int("Gene position to edit: ")
        if position is None:
            return
        new_name = self.ask_text("New name: ")
        new_sequence = self.ask_text("New sequence: ")
        new_function = self.ask_text("New function: ")

        try:
            self.plasmid.edit_gene(position, new_name, new_sequence, new_function)
            self.write(f"Gene at position {position} updated.")
        except PlasmidError as e:
            logger.debug(f"Edit failed: {e}")
            self.write("Error editing gene.")

    def _check_position(self, position: int) -> bool:
        if self.plasmid.is_empty:
            self.write("Plasmid is empty.")
            return False
        try:
            self.plasmid.gene_at(position)
        except NotFoundError:
            self.write(f"No gene at position {position}.")
            return False
        return True


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="plasmid-manager",
        description="Plasmid Manager - Keep an ordered list of genes and design PCR primers"
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="YAML configuration file"
    )

    parser.add_argument(
        "--load",
        type=Path,
        help="CSV file (name,sequence,function) to load at start-up"
    )

    parser.add_argument(
        "--save",
        type=Path,
        help="Write a plasmid report to this file on exit"
    )

    parser.add_argument(
        "--name-width",
        type=int,
        help="Width of the name column in saved reports (default: 10)"
    )

    parser.add_argument(
        "--encoding",
        help="Text encoding of CSV and report files (default: utf-8)"
    )

    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        help="Logging level (default: INFO)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for command line interface."""
    args = build_parser().parse_args(argv)

    try:
        base = PlasmidConfig.from_yaml(args.config) if args.config else None
        config = PlasmidConfig.from_args(vars(args), base=base)
    except PlasmidError as e:
        setup_logging("ERROR")
        logger.error(f"Configuration failed: {e}")
        sys.exit(1)

    # Setup logging
    setup_logging(config.log_level)

    print("Creating a new empty plasmid...")

    with Plasmid() as plasmid:
        try:
            if config.load_file is not None:
                PlasmidCSVParser(config.load_file, encoding=config.encoding).load_into(plasmid)

            PlasmidShell(plasmid, config).run()

            if config.save_file is not None:
                PlasmidReportWriter(config.name_width, config.encoding).write(plasmid, config.save_file)

        except PlasmidError as e:
            logger.error(f"Plasmid manager failed: {e}")
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Plasmid manager interrupted by user")
            sys.exit(1)


if __name__ == "__main__":
    main()
