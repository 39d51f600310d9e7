"""RenoCost - Renovation Cost & Financial Estimation Engine.

This package contains the deterministic calculators behind the renovation
planning application. Every calculator is a pure function returning an
immutable pydantic model that can be serialized verbatim into a prompt
payload or handed to export tooling.

Architecture:
- models: Frozen value objects (descriptor, cost breakdown, ROI, payments, timeline)
- services: Rule-based calculators (allocation, ROI, payments, phases, confidence)
- config: Settings, named defaults and error codes
- utils: Structured logging helpers
"""

__version__ = "1.0.0"
