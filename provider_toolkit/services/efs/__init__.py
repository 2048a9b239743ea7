"""Amazon EFS file system and access point waiters."""
