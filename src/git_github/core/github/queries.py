"""GraphQL documents sent to the GitHub API.

Page sizes are fixed at 100 and no further pages are requested. Ordering is
always creation time, newest first.
"""

PAGE_SIZE = 100

REMOTE_REF_STATUS_QUERY = """
query($owner: String!, $name: String!, $qualifiedName: String!, $headRefName: String!) {
  repository(owner: $owner, name: $name) {
    nameWithOwner
    parent { nameWithOwner }
    ref(qualifiedName: $qualifiedName) {
      target { oid }
    }
    pullRequests(
      first: 100
      headRefName: $headRefName
      states: [OPEN, CLOSED, MERGED]
      orderBy: {field: CREATED_AT, direction: DESC}
    ) {
      nodes {
        number
        title
        url
        author { login }
        createdAt
        authorAssociation
        state
        headRefName
        headRepository { nameWithOwner }
        baseRefName
        baseRepository { nameWithOwner }
      }
    }
  }
}
"""

VIEWER_PULL_REQUESTS_QUERY = """
query {
  viewer {
    pullRequests(first: 100, states: [OPEN], orderBy: {field: CREATED_AT, direction: DESC}) {
      nodes {
        number
        title
        createdAt
        author { login }
        repository { nameWithOwner }
      }
    }
  }
}
"""

VIEWER_ISSUES_QUERY = """
query {
  viewer {
    issues(first: 100, states: [OPEN], orderBy: {field: CREATED_AT, direction: DESC}) {
      nodes {
        number
        title
        createdAt
        author { login }
        repository { nameWithOwner }
      }
    }
  }
}
"""

VIEWER_QUERY = """
query {
  viewer {
    login
    name
    email
  }
}
"""

VIEWER_ORGANIZATIONS_QUERY = """
query {
  viewer {
    organizations(first: 100) {
      nodes {
        login
        name
        description
        url
      }
    }
  }
}
"""
