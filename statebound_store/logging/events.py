"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<category>.<action>

    component: store, config, cli
    category: region, seed, command
    action: created, deleted, loaded, failed

Example Log Query (jq):
    jq 'select(.event == "store.region.created") | .metadata.name'
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - store.*: Region store mutations
    - config.*: Configuration loading
    - cli.*: Command execution
    """

    # ========== Store Events ==========
    REGION_CREATED = "store.region.created"
    """Region inserted into the store."""

    REGION_DELETED = "store.region.deleted"
    """Region removed from the store."""

    REGION_ABSENT = "store.region.absent"
    """Delete of a name that is not in the store (no-op, DEBUG)."""

    STORE_SEEDED = "store.seeded"
    """Store populated from configuration."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """YAML configuration parsed and validated."""

    # ========== CLI Events ==========
    COMMAND_FAILED = "cli.command.failed"
    """CLI command ended with an error."""
