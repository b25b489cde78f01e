"""Calculator input accumulator and its HTTP/WebSocket host.

The accumulator (`calcpad.accumulator`) and its models (`calcpad.models`) are free
of FastAPI concerns so they can be driven by the API, a CLI, or tests alike.
"""
