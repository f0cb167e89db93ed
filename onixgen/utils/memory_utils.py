"""Memory usage monitoring utilities"""
import os
import psutil
import logging

logger = logging.getLogger(__name__)


def log_memory_usage(label=None):
    """Log current memory usage and return usage in MB"""
    try:
        process = psutil.Process(os.getpid())
        memory_mb = process.memory_info().rss / 1024 / 1024
        prefix = f"[{label}] " if label else ""
        logger.info(f"{prefix}Current memory usage: {memory_mb:.2f} MB")
        return memory_mb
    except psutil.Error as e:
        logger.error(f"Error getting memory usage: {str(e)}")
        return 0
