"""
Service layer.

``PersonService`` owns every decision the API makes (validation,
filtering, upsert dispatch); endpoint modules only translate its
results and exceptions into HTTP responses.
"""
