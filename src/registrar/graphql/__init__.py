"""GraphQL schema, types and resolvers for the Registrar API."""
