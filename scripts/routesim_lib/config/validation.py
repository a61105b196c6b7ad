"""
Validation functions for routesim configuration.

IP address and topology validation utilities.
"""

import re
from typing import List

from .dataclasses import TopologyConfig


OCTET_PATTERN = re.compile(r"[0-9]+")


def validate_ipv4(ip: str) -> bool:
    """
    Validate a dotted-quad IPv4 address.

    Exactly four non-empty, all-digit octets in 0-255 separated by three
    dots. Leading zeros are accepted ("01" is 1) and the string is not
    canonicalized.
    """
    if not isinstance(ip, str) or not ip:
        return False
    octets = ip.split(".")
    if len(octets) != 4:
        return False
    for octet in octets:
        if not OCTET_PATTERN.fullmatch(octet):
            return False
        if int(octet) > 255:
            return False
    return True


def validate_topology_config(config: TopologyConfig) -> List[str]:
    """
    Validate a topology configuration.
    Returns list of error messages (empty if valid).
    """
    errors = []

    count = config.router_count
    if not isinstance(count, int) or count < 1:
        errors.append(f"router_count must be a positive integer, got {count!r}")
        return errors  # Can't check anything sized by the router count

    if not isinstance(config.max_networks_per_router, int) or config.max_networks_per_router < 0:
        errors.append(f"max_networks_per_router must be a non-negative integer, got {config.max_networks_per_router!r}")

    if not isinstance(config.cache_capacity, int) or config.cache_capacity < 0:
        errors.append(f"cache_capacity must be a non-negative integer, got {config.cache_capacity!r}")

    # Adjacency matrix must be R x R of 0/1
    adjacency = config.adjacency
    if not isinstance(adjacency, list) or len(adjacency) != count:
        errors.append(f"adjacency must have {count} rows")
    else:
        for i, row in enumerate(adjacency):
            if not isinstance(row, (list, tuple)) or len(row) != count:
                errors.append(f"adjacency row {i + 1} must have {count} columns")
                continue
            for j, cell in enumerate(row):
                if cell not in (0, 1):
                    errors.append(f"adjacency[{i + 1}][{j + 1}]: expected 0 or 1, got {cell!r}")

    # Network ownership: first registration wins, later duplicates are errors
    owners: dict[str, int] = {}
    seen_routers = set()
    for entry in config.routers:
        rid = entry.router_id
        if not isinstance(rid, int) or not 1 <= rid <= count:
            errors.append(f"Router id {rid!r} out of range (1-{count})")
            continue
        if rid in seen_routers:
            errors.append(f"Router {rid} listed more than once")
            continue
        seen_routers.add(rid)

        if isinstance(config.max_networks_per_router, int) and len(entry.networks) > config.max_networks_per_router:
            errors.append(
                f"Router {rid} has {len(entry.networks)} networks "
                f"(max {config.max_networks_per_router})"
            )

        for ip in entry.networks:
            if not validate_ipv4(ip):
                errors.append(f"Router {rid}: invalid IP address {ip!r}")
                continue
            if ip in owners:
                errors.append(
                    f"Router {rid}: IP {ip} is already registered to router {owners[ip]}"
                )
                continue
            owners[ip] = rid

    return errors
