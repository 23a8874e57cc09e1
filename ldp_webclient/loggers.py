import logging


class Loggers:
    def __init__(self, console, file_only):
        self.console = console
        self.file_only = file_only


def create_loggers(level, logfilename=None):
    '''Creates and configures a Loggers object which contains two loggers:
        console - logs to both the console and the log file
        file_only - only logs to the file; records the changes made to the
                    server at INFO whatever the level
    Without a log file name, file_only discards its records.'''

    # create console logger
    console = logging.getLogger("ldp_webclient.output")
    console.setLevel(level)
    console.propagate = False
    console.handlers.clear()

    console_handler = logging.StreamHandler()
    console_formatter = logging.Formatter("%(asctime)s %(levelname)-8s "
                                          "%(message)s")
    console_handler.setFormatter(console_formatter)
    console.addHandler(console_handler)

    if logfilename:
        file_handler = logging.FileHandler(filename=logfilename, mode="w")
        file_formatter = logging.Formatter("%(asctime)s %(levelname)-8s "
                                           "%(module)-12s : %(lineno)d =>  "
                                           "%(message)s")
        file_handler.setFormatter(file_formatter)
        console.addHandler(file_handler)
    else:
        file_handler = logging.NullHandler()

    # create file only logger
    file_only = logging.getLogger("ldp_webclient.file_only")
    file_only.setLevel(min(level, logging.INFO))
    file_only.propagate = False
    file_only.handlers.clear()
    file_only.addHandler(file_handler)

    # library modules log under the package logger
    package = logging.getLogger("ldp_webclient")
    package.handlers.clear()
    package.setLevel(level)
    package.addHandler(file_handler if logfilename else console_handler)

    return Loggers(console, file_only)
