# Live checks against a real codec. Not part of the pytest suite.
#   pip install -e .[testing]
#   python3 testing.py --host 192.168.1.20 --username admin --password secret
import argparse
import getpass
import logging
import sys

import requests
from rich.console import Console
from rich.table import Table

import pytpcontrol as ptc

console = Console()


def rule_msg(msg, sep="-"):
    console.rule(f"[bold]{msg}[/bold]", characters=sep)


def report(results, name, response):
    ok = response.status_code == 200
    results.append((name, response.status_code, ok))
    style = "green" if ok else "red"
    console.print(f"[{style}]{name}: HTTP {response.status_code}[/{style}]")


def documents_test(codec, results):
    rule_msg("Documents")
    report(results, "configuration.xml", codec.get_configuration())
    report(results, "command.xml", codec.get_commands())
    report(results, "status.xml", codec.get_status())
    report(results, "valuespace.xml", codec.get_valuespace())
    report(results, "getxml", codec.get_xml("Status/SystemUnit"))


def feedback_test(codec, results, server_url, slot):
    rule_msg("HTTP feedback")
    response = codec.set_http_feedback(
        server_url,
        ["/Status/Call", "/Event/CallSuccessful"],
        feedback_slot=slot,
    )
    report(results, f"register slot {slot}", response)
    report(results, f"deregister slot {slot}", codec.unset_http_feedback(slot))


def sumup(results):
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Check")
    table.add_column("HTTP status")
    table.add_column("Result")
    for name, status, ok in results:
        table.add_row(name, str(status), "[green]OK[/green]" if ok else "[red]FAILED[/red]")
    console.print(table)
    return all(ok for _, _, ok in results)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Test pytpcontrol against a codec")
    parser.add_argument("--host", required=True, help="Codec IP address or hostname")
    parser.add_argument("--username", default="admin")
    parser.add_argument("--password", help="Prompted for when omitted")
    parser.add_argument("--feedback-url", help="Server URL to register for HTTP feedback")
    parser.add_argument("--slot", type=int, default=4, help="Feedback slot to use (1-4)")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    password = args.password if args.password is not None else getpass.getpass()
    codec = ptc.TpConnector(
        args.host, {"username": args.username, "password": password}, timeout=10
    )

    results = []
    try:
        documents_test(codec, results)
        if args.feedback_url:
            feedback_test(codec, results, args.feedback_url, args.slot)
    except requests.RequestException as e:
        console.print(f"[bold red]Request failed:[/bold red] {e}")
        sys.exit(1)

    sys.exit(0 if sumup(results) else 1)
