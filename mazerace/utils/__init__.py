"""Random source, snapshots and logging helpers."""
