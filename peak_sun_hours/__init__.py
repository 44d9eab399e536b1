"""
Peak sun hours - monthly and yearly irradiance reports from PVGIS
"""

__version__ = "1.0.0"
