"""
Management command offering an interactive RPN calculator:
- `manage.py rpn 3 4 +` converts and evaluates a single expression
- `manage.py rpn` starts a prompt that reads one expression per line
"""
import logging
import sys

from django.core.management.base import BaseCommand

from converter.dsl import ExpressionArgumentError, LexicalError, StructuralError, DivisionByZeroError
from converter.utils import convert_to_infix, evaluate_rpn, format_result

logger = logging.getLogger(__name__)

PROMPT = "RPN> "
CLEAR_SCREEN = "\033[2J\033[H"

EXAMPLES = [
    ("3 4 +", "simple addition"),
    ("3 4 + 2 *", "order of operations"),
    ("15 7 1 1 + - / 3 * 2 1 1 + + -", "complex expression"),
]


class Command(BaseCommand):
    help = "Convert RPN expressions to infix notation and evaluate them"
    stealth_options = ("stdin",)

    def add_arguments(self, parser):
        parser.add_argument(
            "expression",
            nargs="*",
            help="Expression to process once, e.g. 3 4 +. Omit to start the prompt.",
        )

    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS("=== RPN Calculator ==="))
        self.stdout.write("Converts Reverse Polish Notation to infix and evaluates it")
        self.stdout.write("Supports: +, -, *, / with integers and decimals")
        self.stdout.write("")

        if options["expression"]:
            self.process_expression(" ".join(options["expression"]))
            return

        self.show_examples()
        self.run_interactive(options.get("stdin") or sys.stdin)

    def show_examples(self):
        self.stdout.write("Try these examples:")
        for expression, description in EXAMPLES:
            self.stdout.write(f"  {expression:<34} ({description})")
        self.stdout.write("")
        self.stdout.write("Type 'help' for more info, 'quit' to exit")
        self.stdout.write("")

    def show_help(self):
        self.stdout.write("")
        self.stdout.write("=== Help ===")
        self.stdout.write("RPN (Reverse Polish Notation) puts operators after operands:")
        self.stdout.write("  Instead of: 3 + 4")
        self.stdout.write("  Write: 3 4 +")
        self.stdout.write("")
        self.stdout.write("Commands:")
        self.stdout.write("  help  - Show this help")
        self.stdout.write("  clear - Clear screen")
        self.stdout.write("  quit  - Exit program (also: exit)")
        self.stdout.write("")

    def run_interactive(self, stdin):
        while True:
            self.stdout.write(PROMPT, ending="")
            self.stdout.flush()
            line = stdin.readline()
            if not line:
                self.stdout.write("")
                break

            expression = line.rstrip("\r\n")
            if not expression.strip():
                continue

            command = expression.strip().lower()
            if command in ("quit", "exit"):
                self.stdout.write("Thanks for using the RPN Calculator!")
                break
            if command == "help":
                self.show_help()
                continue
            if command == "clear":
                self.stdout.write(CLEAR_SCREEN, ending="")
                self.show_examples()
                continue

            self.process_expression(expression)
            self.stdout.write("")

    def process_expression(self, expression):
        self.stdout.write(f"Input: {expression}")
        try:
            infix = convert_to_infix(expression)
        except (ExpressionArgumentError, LexicalError, StructuralError) as e:
            logger.debug(f"Invalid expression {expression!r}: {e}")
            self.stdout.write(self.style.ERROR(f"Invalid RPN: {e}"))
            self.stdout.write("Remember: operands first, then operators (e.g., '3 4 +' not '3 + 4')")
            return

        self.stdout.write(f"Infix: {infix}")
        try:
            result = evaluate_rpn(expression)
        except DivisionByZeroError:
            self.stdout.write(self.style.ERROR("= Error: Can't divide by zero!"))
            return
        self.stdout.write(self.style.SUCCESS(f"= {format_result(result)}"))
