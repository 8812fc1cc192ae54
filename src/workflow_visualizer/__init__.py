"""GitHub Workflow Visualizer.

Turns a GitHub Actions workflow file into:
- a Mermaid dependency graph of its jobs
- a per-job step table
- a normalized list of trigger events
"""

__version__ = "0.1.0"

from workflow_visualizer.visualizer.config import VisualizerSettings

__all__ = ["__version__", "VisualizerSettings"]
