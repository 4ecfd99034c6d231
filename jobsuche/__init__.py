SERVER_NAME = "Jobsuche Server"
__version__ = "0.3.1"
