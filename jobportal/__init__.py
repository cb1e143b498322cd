"""
Job portal backend: employers, candidates, job posts and applications.
"""
