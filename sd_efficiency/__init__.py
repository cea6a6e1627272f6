"""
SD Efficiency Pro - Storage Media Stress-Test Dashboard

Log SD card stress-test sessions (total, good and bad hours), derive the
efficiency of each run, and review aggregate metrics and trends.
"""

__version__ = "1.0.0"
__author__ = "SD Efficiency Contributors"
