class InvalidFusionRecord(Exception):
    """
    raised when a row of the fusion candidates file cannot be parsed

    the input is expected to be machine generated so this aborts the run
    """

    pass


class ExternalFilterError(Exception):
    """
    raised when the external blast and promiscuity filter exits with an error or does
    not produce the expected output files
    """

    pass
