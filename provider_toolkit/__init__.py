"""
Provider toolkit package.

Status pollers, lookup wrappers and composite ID codecs for AWS resources.
"""
