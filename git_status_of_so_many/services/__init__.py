"""Services for git-status-of-so-many.

- discovery: finding repositories below the configured root
- git: read-only git queries
- status_parser: turning `git status` text into fields
- status_service: assembling a RepositoryStatus per repository
- display_service: printing the report
"""
