"""Worked solutions to the course drills on basics, errors, concurrency, collections and structures."""