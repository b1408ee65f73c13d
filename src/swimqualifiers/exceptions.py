"""Exceptions raised by swimqualifiers."""


class SwimQualifiersError(Exception):
    """Base class for all swimqualifiers errors."""


class EmptyStandardsError(SwimQualifiersError):
    """No usable time standards were supplied, so no result could ever qualify."""


class AggregationClosedError(SwimQualifiersError):
    """An outcome was added to an aggregator that has already been finalized."""


class ImportFileError(SwimQualifiersError):
    """A standards workbook or meet data folder could not be read."""
