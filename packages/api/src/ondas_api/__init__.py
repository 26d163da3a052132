"""ondas-api - HTTP service serving radio stations to signage screens."""
