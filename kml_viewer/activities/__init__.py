"""Pipeline stages.

- parse_kml: KML markup to FeatureCollection
- summarize: count per geometry kind
- build_details: great-circle length per line feature
- build_envelope: bounding envelope for viewport fitting
"""
