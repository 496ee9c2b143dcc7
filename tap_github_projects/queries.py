"""GraphQL documents sent to the GitHub API.

Only two shapes exist: one page of project items and the project's field
configuration. Both are parameterized by organization login and project
number; the items query additionally takes a pagination cursor.
"""

from __future__ import annotations

# Issue and DraftIssue content only. Assignees, labels and field values are
# fetched in a single page each (10, 100 and 100 respectively).
ITEMS_QUERY = """
query ($org: String!, $projNum: Int!, $cursor: String) {
  organization(login: $org) {
    name
    projectNext(number: $projNum) {
      title
      url
      items(first: 100, after: $cursor) {
        totalCount
        nodes {
          content {
            type: __typename
            ... on Issue {
              title
              number
              state
              assignees(first: 10) {
                nodes {
                  name
                }
              }
              labels(first: 100) {
                nodes {
                  name
                }
              }
            }
            ... on DraftIssue {
              title
              assignees(first: 10) {
                nodes {
                  name
                }
              }
            }
          }
          fieldValues(first: 100) {
            nodes {
              projectField {
                name
                settings
              }
              value
            }
          }
        }
        pageInfo {
          endCursor
          hasNextPage
        }
      }
    }
  }
}
"""

FIELDS_QUERY = """
query ($org: String!, $projNum: Int!) {
  organization(login: $org) {
    name
    projectNext(number: $projNum) {
      title
      url
      fields(first: 100) {
        nodes {
          dataType
          name
          settings
        }
      }
    }
  }
}
"""
