"""
PipelineLib - End-to-end image combine pipeline

This module wires import, combine and export into a single run.
"""

from IC_Libs.PipelineLib.combine_pipeline import (
    CombineConfig,
    combine_source_images,
    run_combine_pipeline,
)

__all__ = [
    "CombineConfig",
    "combine_source_images",
    "run_combine_pipeline",
]
