import asyncio
import logging
import sys
from typing import Optional

import click
import httpx

from config import Settings, load_settings
from models import ScanResult, ScanSummary
from scanner import AnonAddy, HIBP, ConfigError, OrchestratorError, ScanOrchestrator


def build_client(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """One HTTP client shared by both providers for the whole run."""
    return httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS, transport=transport)


async def run_scan(
    settings: Settings,
    on_result=None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> tuple[list[ScanResult], ScanSummary]:
    async with build_client(settings, transport) as client:
        anonaddy = AnonAddy(client, settings.ANONADDY_TOKEN, host=settings.ANONADDY_HOST)
        hibp = HIBP(
            client,
            settings.HIBP_TOKEN,
            host=settings.HIBP_HOST,
            user_agent=settings.USER_AGENT,
            default_wait=settings.RATE_LIMIT_DEFAULT_WAIT_SECONDS,
            max_wait=settings.RATE_LIMIT_MAX_WAIT_SECONDS,
        )
        orchestrator = ScanOrchestrator()
        results = await orchestrator.run(anonaddy, hibp, on_result=on_result)
        return results, orchestrator.get_summary()


def print_result(result: ScanResult) -> None:
    """Print one alias outcome as soon as it is known."""
    alias = result.alias
    label = f"{alias.email} ({alias.description})" if alias.description else alias.email

    if result.lookup_failed:
        click.echo(f"⚠️  {label}: lookup failed - {result.error}")
        return
    if not result.compromised:
        click.echo(f"✅ {label}: no breaches")
        return

    click.echo(f"🚨 {label}: found in {result.breach_count} breach(es)")
    for breach in result.breaches:
        date = f" ({breach.breach_date})" if breach.breach_date else ""
        click.echo(f"   - {breach.label}{date}")
    if result.deactivated:
        click.echo(f"   🔒 deactivated alias {alias.id}")
    else:
        click.echo(f"   ❌ could not deactivate alias {alias.id}: {result.error}")


def print_summary(summary: ScanSummary) -> None:
    click.echo("\n================ Scan Summary =================")
    click.echo(f"📬 Aliases listed:   {summary.aliases_listed}")
    click.echo(f"🔍 Aliases scanned:  {summary.aliases_scanned}")
    click.echo(f"🚨 Compromised:      {summary.compromised}")
    click.echo(f"🔒 Deactivated:      {summary.deactivated}")
    if summary.lookup_failures or summary.deactivation_failures:
        click.echo(f"⚠️  Lookup failures:  {summary.lookup_failures}")
        click.echo(f"⚠️  Deactivation failures: {summary.deactivation_failures}")
    click.echo(f"⏱️  Time:             {summary.scan_time_seconds:.1f}s")
    click.echo("===============================================\n")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--env-file", default=".env", show_default=True, help="Path to a .env file with credentials.")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def cli(env_file: str, verbose: bool) -> None:
    """Deactivate AnonAddy aliases that appear in Have I Been Pwned breaches."""
    try:
        settings = load_settings(env_file)
    except ConfigError as e:
        click.echo(f"\n❌ Error: {e}", err=True)
        sys.exit(2)

    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    click.echo(f"\n{settings.APP_NAME} v{settings.VERSION}\n")

    try:
        _, summary = asyncio.run(run_scan(settings, on_result=print_result))
    except OrchestratorError as e:
        click.echo(f"\n❌ Error: {e}", err=True)
        sys.exit(1)

    print_summary(summary)


if __name__ == "__main__":
    cli()
