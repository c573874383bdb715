"""
Interactive POS controller
Drives the operator menu: new bill, retrieve pending, list pending,
revenue report and exit
"""

import logging
import time
from datetime import date
from enum import IntEnum
from pathlib import Path
from typing import Callable, Optional

from supersaver_pos.config.pos_config import PosConfig
from supersaver_pos.exceptions import (
    ItemNotFoundError,
    PendingBillNotFoundError,
    ReceiptWriteError,
    ReportWriteError,
    ValidationError,
)
from supersaver_pos.models.bill import Bill
from supersaver_pos.receipts.receipt_format import format_amount, receipt_file_name
from supersaver_pos.receipts.revenue_aggregator import RevenueAggregator
from supersaver_pos.services.session import PosSession


logger = logging.getLogger(__name__)

DONE_TOKEN = "done"
YES_TOKEN = "yes"


class MenuOption(IntEnum):
    """Top-level menu entries"""
    NEW_BILL = 1
    RETRIEVE_PENDING = 2
    SHOW_PENDING = 3
    REVENUE_REPORT = 4
    EXIT = 5


MENU_LABELS = {
    MenuOption.NEW_BILL: "New Bill",
    MenuOption.RETRIEVE_PENDING: "Retrieve Pending Bill",
    MenuOption.SHOW_PENDING: "Show All Pending Bills",
    MenuOption.REVENUE_REPORT: "Generate Revenue Report",
    MenuOption.EXIT: "Exit",
}


InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


class PosController:
    """
    Operator menu state machine

    Reads from a single input function and writes to a single output
    function, so a session can be scripted. End of input ends the session
    the same way as choosing Exit.

    Example:
        >>> controller = PosController(PosSession.from_config(config), config)
        >>> exit_code = controller.run()
    """

    def __init__(
        self,
        session: PosSession,
        config: Optional[PosConfig] = None,
        input_func: InputFunc = input,
        output_func: OutputFunc = print,
        aggregator: Optional[RevenueAggregator] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.session = session
        self.config = config or PosConfig()
        self._input = input_func
        self._output = output_func
        self.aggregator = aggregator or RevenueAggregator.from_config(self.config)
        self._clock = clock

    def run(self) -> int:
        """
        Run the menu loop until Exit or end of input

        Returns:
            Process exit code
        """
        while True:
            try:
                if not self.step():
                    break
            except EOFError:
                self._say("")
                break
        self._say("Exiting SuperSaver POS. Goodbye!")
        return 0

    def step(self) -> bool:
        """Show the menu and handle one selection; False means exit"""
        self._show_menu()
        raw = self._ask("Select an option: ").strip()

        try:
            option = MenuOption(int(raw))
        except ValueError:
            self._say("Invalid option. Try again.")
            return True

        if option == MenuOption.NEW_BILL:
            self.new_bill()
        elif option == MenuOption.RETRIEVE_PENDING:
            self.retrieve_pending_bill()
        elif option == MenuOption.SHOW_PENDING:
            self.show_pending_bills()
        elif option == MenuOption.REVENUE_REPORT:
            self.revenue_report()
        else:
            return False
        return True

    def new_bill(self) -> None:
        cashier = self._ask("Enter Cashier Name: ")
        branch = self._ask("Enter Branch: ")
        customer = self._ask("Enter Customer Name (or press Enter for Guest): ")

        bill = Bill(cashier_name=cashier, branch=branch, customer_name=customer)
        self._enter_items(
            bill,
            prompt="Enter Item Code (or type 'done' to finish): ",
            added_suffix="added to the bill.",
        )

        self._say("\n--- Bill Summary ---")
        self._say(f"Total Cost: {self._amount(bill.get_total())}")
        self._dispose(bill, "Save bill as pending? (yes/no): ")

    def retrieve_pending_bill(self) -> None:
        self.show_pending_bills()
        raw = self._ask("Enter Bill ID to retrieve: ").strip()

        try:
            bill_id = int(raw)
        except ValueError:
            self._say(f"Invalid bill ID: {raw}")
            return

        try:
            bill = self.session.retrieve_pending(bill_id)
        except PendingBillNotFoundError as e:
            self._say(str(e))
            return

        self._say("\n--- Retrieved Bill Summary ---")
        self._say(f"Total Cost: {self._amount(bill.get_total())}")

        self._enter_items(
            bill,
            prompt="Enter Item Code to add (or type 'done' to finish): ",
            added_suffix="added.",
        )

        self._say(f"\nUpdated Total Cost: {self._amount(bill.get_total())}")
        self._dispose(bill, "Save updated bill as pending? (yes/no): ", token=bill_id)

    def show_pending_bills(self) -> None:
        if self.session.pending_count == 0:
            self._say("No pending bills.")
            return

        self._say("--- Pending Bills ---")
        for summary in self.session.list_pending():
            self._say(
                f"ID: {summary.bill_id} | Customer: {summary.customer_name} "
                f"| Total: {self._amount(summary.total)}"
            )

    def revenue_report(self) -> None:
        try:
            start_date = self._ask_date("Enter Start Date (yyyy-MM-dd): ")
            end_date = self._ask_date("Enter End Date (yyyy-MM-dd): ")
            summary = self.aggregator.aggregate(start_date, end_date)
        except ValidationError as e:
            self._say(str(e))
            return

        for skipped in summary.skipped:
            self._say(f"Error reading bill file: {skipped.file_name} ({skipped.reason})")

        try:
            report_path = self.aggregator.write_report(summary)
        except ReportWriteError as e:
            self._say(f"Error writing revenue report: {e}")
            return

        self._say(f"Total Revenue: {self._amount(summary.total_revenue)}")
        self._say(f"Revenue Report generated: {report_path.name}")

    def _enter_items(self, bill: Bill, prompt: str, added_suffix: str) -> None:
        """Add items by code until the done token"""
        while True:
            item_code = self._ask(prompt).strip()
            if item_code.lower() == DONE_TOKEN:
                return
            if not item_code:
                continue

            try:
                item = self.session.lookup(item_code)
            except ItemNotFoundError:
                self._say("Item not found.")
                continue

            bill.add_item(item)
            self._say(f"{item.item_name} {added_suffix}")

    def _dispose(self, bill: Bill, prompt: str, token: Optional[int] = None) -> None:
        """Park the bill as pending or finalize it to a receipt file"""
        answer = self._ask(prompt).strip()

        if answer.lower() == YES_TOKEN:
            bill_id = self.session.save_pending(bill)
            self._say(f"Bill saved as pending with ID: {bill_id}")
            return

        path = self._receipt_path(token)
        try:
            bill.finalize(
                path,
                store_name=self.config.store_name,
                currency_marker=self.config.currency_marker,
            )
        except ReceiptWriteError as e:
            self._say(f"Error writing bill receipt: {e}")
            return

        logger.info("Bill finalized to %s with %d item(s)", path, bill.item_count)
        self._say(f"Bill finalized and saved to {path.name}")

    def _receipt_path(self, token: Optional[int]) -> Path:
        """
        Receipt path named by pending id, or by epoch milliseconds for new bills

        Existing receipts are never overwritten: a pending id that was used
        in an earlier session gets a numbered suffix, and an epoch name is
        bumped to the next free millisecond.
        """
        receipts_dir = Path(self.config.receipts_dir)
        prefix = self.config.receipt_prefix

        if token is not None:
            path = receipts_dir / receipt_file_name(token, prefix)
            suffix = 0
            while path.exists():
                suffix += 1
                path = receipts_dir / receipt_file_name(f"{token}_{suffix}", prefix)
            if suffix:
                logger.warning(
                    "Receipt for pending bill %s already exists; writing %s instead",
                    token,
                    path.name,
                )
            return path

        millis = int(self._clock() * 1000)
        path = receipts_dir / receipt_file_name(millis, prefix)
        while path.exists():
            millis += 1
            path = receipts_dir / receipt_file_name(millis, prefix)
        return path

    def _ask_date(self, prompt: str) -> date:
        raw = self._ask(prompt).strip()
        try:
            return date.fromisoformat(raw)
        except ValueError:
            raise ValidationError(f"Invalid date: {raw}", field="date") from None

    def _show_menu(self) -> None:
        self._say("\n=== SuperSaver POS ===")
        for option in MenuOption:
            self._say(f"{option.value}. {MENU_LABELS[option]}")

    def _amount(self, amount: float) -> str:
        return format_amount(amount, self.config.currency_marker)

    def _ask(self, prompt: str) -> str:
        return self._input(prompt)

    def _say(self, message: str) -> None:
        self._output(message)
