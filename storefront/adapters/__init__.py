"""External adapters for the storefront.

This package provides the default implementations of the core port
interfaces. None of them talk to a network; they are the collaborators
the composition root wires in when nothing else is configured.

Adapter Organization:

- currency/: Exchange-rate sources (static rate table)
- shipping/: Shipping-quote sources (flat-rate table)
- analytics/: Page-view trackers (logging)
- payment/: Payment chargers (sandbox)
- email/: Email senders (stdout)
- security/: One-time code generators (random)
- cli/: Command-line interface commands
"""
