import pytest

import graphql
from graphql import graphql_sync

from cursorpager import CursorPager, Page
from cursorpager.cursors import PageLinks, decode_cursor
from cursorpager.integration.graphql import graphql_pager_schema, PageInfoType, pager_info
from cursorpager.queriers import ListQuerier

from tests.util.dataset import STATUSES, ORDERINGS, BY_NAME


def test_pager_schema():
    """ Schema-first: the PageInfo type """
    schema = graphql.build_schema(graphql_pager_schema + '''
        type Query {
            statuses(cursor: String! = "", limit: Int): StatusesPage!
        }

        type StatusesPage {
            items: [Status!]!
            pageInfo: PageInfo!
        }

        type Status {
            id: Int!
            name: String!
        }
    ''')

    # Resolver
    def resolve_statuses(root, info: graphql.GraphQLResolveInfo, cursor: str, limit: int = None):
        page = pager.paginate(cursor, limit)
        return {'items': page.rows, 'pageInfo': pager_info(page)}

    pager = CursorPager(ListQuerier(STATUSES, ORDERINGS), BY_NAME)
    schema.query_type.fields['statuses'].resolve = resolve_statuses

    # First page
    query = '''
        query ($cursor: String!) {
            statuses(cursor: $cursor, limit: 2) {
                items { id name }
                pageInfo { next_cursor prev_cursor has_more }
            }
        }
    '''
    res = graphql_sync(schema, query, variable_values={'cursor': ''})
    assert res.errors is None
    assert res.data['statuses']['items'] == [{'id': 3, 'name': 'alice'}, {'id': 2, 'name': 'bob'}]

    page_info = res.data['statuses']['pageInfo']
    assert page_info['prev_cursor'] == ''
    assert page_info['has_more'] is True
    assert decode_cursor(page_info['next_cursor']).sub_cursor_value == 'bob'

    # Next page
    res = graphql_sync(schema, query, variable_values={'cursor': page_info['next_cursor']})
    assert res.errors is None
    assert [item['id'] for item in res.data['statuses']['items']] == [5, 4]


def test_page_info_type():
    """ Code-first: the PageInfoType object """
    schema = graphql.GraphQLSchema(
        query=graphql.GraphQLObjectType('Query', fields={
            'pageInfo': graphql.GraphQLField(
                graphql.GraphQLNonNull(PageInfoType),
                args={'limit': graphql.GraphQLArgument(graphql.GraphQLInt)},
                resolve=lambda root, info, limit: pager_info(pager.paginate('', limit)),
            ),
        }),
    )

    pager = CursorPager(ListQuerier(STATUSES, ORDERINGS), BY_NAME)

    # Page: has more
    res = graphql_sync(schema, 'query { pageInfo(limit: 2) { next_cursor prev_cursor has_more } }')
    assert res.errors is None
    assert res.data['pageInfo']['has_more'] is True
    assert res.data['pageInfo']['prev_cursor'] == ''
    assert res.data['pageInfo']['next_cursor'] != ''

    # Everything fits
    res = graphql_sync(schema, 'query { pageInfo(limit: 100) { next_cursor has_more } }')
    assert res.errors is None
    assert res.data == {'pageInfo': {'next_cursor': '', 'has_more': False}}


@pytest.mark.parametrize(('has_more', 'next', 'prev'), [
    (True, 'abc', ''),
    (False, '', 'xyz'),
])
def test_pager_info(has_more: bool, next: str, prev: str):
    """ pager_info() exports the links """
    page = Page(rows=[], links=PageLinks(prev=prev, next=next), has_more=has_more)
    assert pager_info(page) == {'next_cursor': next, 'prev_cursor': prev, 'has_more': has_more}
