"""Infrastructure layer — rule persistence.

Infrastructure may import from domain. It must never import from
services, commands, or output.
"""
