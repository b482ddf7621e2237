"""Pipeline orchestrators.

- kml_pipeline: convert a KML document and compute the requested views
"""
