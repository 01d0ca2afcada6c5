"""Composition root for the storefront.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Interactive command loop
"""

import asyncio
import json
import logging
import sys
from typing import Any

from storefront.adapters.analytics.logging_tracker import LoggingAnalyticsAdapter
from storefront.adapters.cli.commands import CLICommandHandler
from storefront.adapters.currency.static_rates import StaticExchangeRateAdapter
from storefront.adapters.email.stdout import StdoutEmailAdapter
from storefront.adapters.payment.sandbox import SandboxPaymentAdapter
from storefront.adapters.security.random_code import RandomCodeGenerator
from storefront.adapters.shipping.flat_rate import FlatRateShippingAdapter
from storefront.config import Settings, load_settings
from storefront.core.accounts import AccountService
from storefront.core.checkout import CheckoutService
from storefront.core.models import ShippingQuote
from storefront.core.opening_hours import OpeningHours
from storefront.core.pages import PageRenderer
from storefront.core.pricing import PricingService
from storefront.core.shipping import ShippingService


async def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run interactive CLI loop.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    loop = asyncio.get_running_loop()

    while True:
        try:
            # Read command from stdin in a thread to avoid blocking
            command_line = await loop.run_in_executor(None, input, "storefront> ")
            command_line = command_line.strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            try:
                result = await _execute_cli_command(cli_handler, command, args)
                print(json.dumps(result, indent=2, default=str))
            except ValueError as e:
                print(json.dumps({"status": "error", "message": str(e)}, indent=2))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({"status": "error", "message": str(e)}, indent=2))

        except EOFError:
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _require(args: dict[str, Any], *names: str) -> None:
    for name in names:
        if name not in args:
            raise ValueError(f"Missing required parameter: {name}")


async def _execute_cli_command(
    cli_handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Execute a CLI command.

    Args:
        cli_handler: CLICommandHandler instance.
        command: Command name.
        args: Command arguments.

    Returns:
        Command result dictionary.

    Raises:
        ValueError: If command is not recognized or a parameter is missing.
    """
    if command == "price":
        _require(args, "amount", "currency")
        return cli_handler.get_price(args["amount"], args["currency"])

    elif command == "shipping":
        _require(args, "destination")
        return cli_handler.get_shipping_info(args["destination"])

    elif command == "render":
        return await cli_handler.render_page()

    elif command == "order":
        _require(args, "total_amount", "card_number")
        return await cli_handler.submit_order(args["total_amount"], args["card_number"])

    elif command == "signup":
        _require(args, "email")
        return await cli_handler.sign_up(args["email"])

    elif command == "login":
        _require(args, "email")
        return await cli_handler.login(args["email"])

    elif command == "online":
        return cli_handler.is_online()

    elif command == "discount":
        return cli_handler.get_discount()

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  price
    Convert a store price into another currency.
    Required: amount, currency

    Example: price {"amount": 10, "currency": "AUD"}

  shipping
    Show shipping cost and delivery time for a destination.
    Required: destination

    Example: shipping {"destination": "London"}

  render
    Render the home page.

  order
    Submit an order and charge the card.
    Required: total_amount, card_number

    Example: order {"total_amount": 10, "card_number": "4111111111111111"}

  signup
    Register an email address and send a welcome email.
    Required: email

    Example: signup {"email": "name@domain.com"}

  login
    Email a one-time login code.
    Required: email

  online
    Show whether support is currently online.

  discount
    Show today's discount.

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_cli_handler(settings: Settings) -> CLICommandHandler:
    """Instantiate adapters and core services from settings.

    This is the single place where collaborators are chosen and wired
    into the business functions. Time-dependent services get no clock of
    their own, so they read current_clock() and follow use_clock().
    """
    zone = settings.zone

    exchange_rates = StaticExchangeRateAdapter(settings.exchange_rates)
    shipping_quotes = FlatRateShippingAdapter(
        {
            destination: ShippingQuote(cost=rate.cost, estimated_days=rate.estimated_days)
            for destination, rate in settings.shipping_rates.items()
        }
    )
    analytics = LoggingAnalyticsAdapter()
    payments = SandboxPaymentAdapter(declined_cards=settings.declined_cards)
    email = StdoutEmailAdapter()
    codes = RandomCodeGenerator(digits=settings.login_code_digits)

    return CLICommandHandler(
        pricing=PricingService(
            exchange_rates=exchange_rates,
            base_currency=settings.base_currency,
            zone=zone,
        ),
        shipping=ShippingService(quotes=shipping_quotes),
        pages=PageRenderer(analytics=analytics),
        checkout=CheckoutService(payments=payments),
        accounts=AccountService(
            email=email,
            codes=codes,
            email_pattern=settings.email_pattern,
        ),
        opening_hours=OpeningHours(
            zone=zone,
            open_hour=settings.open_hour,
            close_hour=settings.close_hour,
        ),
    )


async def bootstrap() -> None:
    """Load configuration, wire adapters, and start the command loop.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate adapters and core services
    4. Run the interactive CLI
    """
    settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading storefront...")

    cli_handler = build_cli_handler(settings)
    logger.info(
        f"Services initialized (base currency {settings.base_currency}, "
        f"timezone {settings.store_timezone})"
    )

    await _run_cli_interactive(cli_handler)


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
