# shark_server/api/schema.py
"""
GraphQL SDL exported as a Python string named type_defs.
The application imports this module and expects type_defs to be available.
Person.age is declared Int while the store keeps ages as text; the Person
resolver in routes.py converts at the boundary.
"""

type_defs = """
schema {
  query: Query
  mutation: Mutation
}

type Query {
  health: String!
  ping: String!
  user(id: Int!): Person
  users(tag: String): [Person]
}

type Person {
  id: Int
  name: String
  age: Int
  tag: String
}

type Mutation {
  updateUser(id: Int!, name: String!, age: String): Person
}
"""
