# topmark:header:start
#
#   project      : DtoMeta
#   file         : __init__.py
#   file_relpath : src/dtometa/pipeline/steps/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolution steps of the per-property pipeline.

Each module defines one callable step class deriving from `BaseStep`. The
ordered pipeline itself lives in `dtometa.pipeline.pipelines`.
"""
