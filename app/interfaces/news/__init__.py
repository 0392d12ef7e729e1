"""HTTP interface of the news bounded context: router, schemas, wiring."""
