"""Performance benchmarks for ratebuf.

Compares the fused multirate routines against the materialized
upsample -> convolve -> downsample pipeline.
"""
