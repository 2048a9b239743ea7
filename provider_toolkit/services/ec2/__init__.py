"""Amazon EC2 route table waiters and composite ID codecs."""
