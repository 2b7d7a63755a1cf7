"""
Service layer abstraction.

Services encapsulate the business logic of a domain so that API
handlers only translate between HTTP and service calls.
"""
