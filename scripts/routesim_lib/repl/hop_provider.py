"""
Console hop provider for the routesim REPL.

Asks the operator for shortcut and hop decisions with prompt_toolkit.
"""

from prompt_toolkit import prompt

from routesim_lib.common import Colors, info, warn, prompt_yes_no
from routesim_lib.routing import FINALIZE, HopProvider


class ConsoleHopProvider(HopProvider):
    """Interactive hop decisions read from the terminal."""

    def __init__(self, router_count: int):
        self.router_count = router_count

    def offer_shortcut(self, source: int, dest: int) -> bool:
        info(f"Direct link found between R{source} and R{dest}.")
        answer = prompt_yes_no("Use the direct path?", default=True)
        if answer is None:
            raise KeyboardInterrupt
        if not answer:
            print()
            print(f"{Colors.BOLD}Manual Route Definition{Colors.NC}")
        return answer

    def next_hop(self, current: int, dest: int, path: tuple[int, ...]) -> int:
        trail = " -> ".join(f"R{r}" for r in path)
        value = prompt(
            f"  [{trail}] Next router (1-{self.router_count}, or {FINALIZE} to finalize at R{dest}): "
        ).strip()
        # Non-numeric input is handed on as an out-of-range id
        try:
            return int(value)
        except ValueError:
            return -1

    def hop_rejected(self, reason: str) -> None:
        warn(reason)

    def hop_accepted(self, router_id: int, can_finalize: bool) -> None:
        if can_finalize:
            info(f"R{router_id} is directly connected to the destination. Enter {FINALIZE} to finalize or add another router.")
