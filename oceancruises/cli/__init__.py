"""
CLI modules for oceancruises.

- main.py: Primary CLI interface
- order.py: Station ordering command
- distances.py: Leg distance command
"""
