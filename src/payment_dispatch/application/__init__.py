"""Application layer - Use cases, registry and port definitions.

This layer contains:
- Use Cases: The run-transaction dispatcher
- Registry & Factory: Lookup of payment kinds and construction of records
- Ports: Abstract interfaces for the clock and the output sink

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
