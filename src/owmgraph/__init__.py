"""owmgraph - PNP4Nagios graph template for check_openweathermap."""

__version__ = "1.0.0"
