import os.path

import graphql

# Load GraphQL definitions from the file
pwd = os.path.dirname(__file__)

# Get this schema: for schema-first projects
with open(os.path.join(pwd, './pager.graphql'), 'rt') as f:
    graphql_pager_schema = f.read()


# The same type: for code-first projects.
# Resolves fields from a PagerInfoDict
PageInfoType = graphql.GraphQLObjectType('PageInfo', description='Pagination info: cursors to the neighboring pages', fields={
    'next_cursor': graphql.GraphQLField(
        graphql.GraphQLNonNull(graphql.GraphQLString),
        description="Cursor to the next page. Empty when there's no next page",
    ),
    'prev_cursor': graphql.GraphQLField(
        graphql.GraphQLNonNull(graphql.GraphQLString),
        description="Cursor to the previous page. Empty when there's no previous page",
    ),
    'has_more': graphql.GraphQLField(
        graphql.GraphQLNonNull(graphql.GraphQLBoolean),
        description='Did the query return more rows than the page fits?',
    ),
})
