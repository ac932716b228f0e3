"""
Migration Reporter Module

Renders the collected migration data to the console and writes it to the
JSON output file.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.pretty import Pretty

from .schemas.datamodel import dump_migration_data

logger = logging.getLogger(__name__)


class MigrationReporter:
    """Prints and saves migration results."""

    def __init__(self, output_file, console=None):
        """
        Initialize the MigrationReporter.

        Args:
            output_file (str or Path): JSON file to write, overwritten on each run
            console (Console): Rich console for output (default: stdout)
        """
        self.output_file = Path(output_file)
        self.console = console or Console()

    def report(self, migration_data):
        """
        Print the results and save them as JSON.

        File write errors are not handled and propagate to the caller.

        Args:
            migration_data (dict): Page id to MigrationRecord

        Returns:
            str: The JSON text that was written
        """
        self.console.print("=== Migration Results ===\n", markup=False)

        self.console.print("Array Structure:", markup=False)
        structure = {page_id: record.model_dump() for page_id, record in migration_data.items()}
        self.console.print(Pretty(structure, expand_all=True))

        json_text = dump_migration_data(migration_data)

        self.console.print("\n\n=== JSON Output ===", markup=False)
        self.console.out(json_text, highlight=False)

        self.output_file.write_text(json_text, encoding='utf-8')
        logger.debug(f"Wrote {len(migration_data)} record(s) to {self.output_file}")

        self.console.print(f"\nResults saved to: {self.output_file}", markup=False, highlight=False, soft_wrap=True)
        return json_text
