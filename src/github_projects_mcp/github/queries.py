"""GraphQL documents for the GitHub Projects V2 schema.

Field selections here must stay in step with the response models in
``github_projects_mcp.github.models``.
"""

_PROJECT_SUMMARY = """
            id
            number
            title
            shortDescription
            public
            closed
            createdAt
            updatedAt
            url
"""

GET_USER_PROJECTS = (
    """
    query GetUserProjects($login: String!, $first: Int = 10) {
      user(login: $login) {
        projectsV2(first: $first) {
          nodes {"""
    + _PROJECT_SUMMARY
    + """
          }
        }
      }
    }
    """
)

GET_ORG_PROJECTS = (
    """
    query GetOrgProjects($login: String!, $first: Int = 10) {
      organization(login: $login) {
        projectsV2(first: $first) {
          nodes {"""
    + _PROJECT_SUMMARY
    + """
          }
        }
      }
    }
    """
)

GET_PROJECT_DETAILS = """
    query GetProjectDetails($projectId: ID!) {
      node(id: $projectId) {
        ... on ProjectV2 {
          id
          number
          title
          shortDescription
          public
          closed
          createdAt
          updatedAt
          url
          fields(first: 20) {
            nodes {
              ... on ProjectV2Field {
                id
                name
                dataType
              }
              ... on ProjectV2SingleSelectField {
                id
                name
                dataType
                options {
                  id
                  name
                }
              }
              ... on ProjectV2IterationField {
                id
                name
                dataType
              }
            }
          }
          items(first: 50) {
            nodes {
              id
              type
              content {
                __typename
                ... on Issue {
                  id
                  number
                  title
                  state
                  url
                }
                ... on PullRequest {
                  id
                  number
                  title
                  state
                  url
                }
                ... on DraftIssue {
                  id
                  title
                  body
                }
              }
              fieldValues(first: 20) {
                nodes {
                  ... on ProjectV2ItemFieldTextValue {
                    text
                    field {
                      ... on ProjectV2Field {
                        id
                        name
                      }
                    }
                  }
                  ... on ProjectV2ItemFieldSingleSelectValue {
                    name
                    field {
                      ... on ProjectV2SingleSelectField {
                        id
                        name
                      }
                    }
                  }
                }
              }
            }
          }
        }
      }
    }
"""

CREATE_PROJECT = """
    mutation CreateProject($ownerId: ID!, $title: String!) {
      createProjectV2(input: {
        ownerId: $ownerId
        title: $title
      }) {
        projectV2 {
          id
          number
          title
          shortDescription
          public
          url
        }
      }
    }
"""

UPDATE_PROJECT = """
    mutation UpdateProject($projectId: ID!, $title: String, $description: String, $public: Boolean) {
      updateProjectV2(input: {
        projectId: $projectId
        title: $title
        shortDescription: $description
        public: $public
      }) {
        projectV2 {
          id
          number
          title
          shortDescription
          public
          url
        }
      }
    }
"""

ADD_ITEM_TO_PROJECT = """
    mutation AddItemToProject($projectId: ID!, $contentId: ID!) {
      addProjectV2ItemById(input: {
        projectId: $projectId
        contentId: $contentId
      }) {
        item {
          id
        }
      }
    }
"""

UPDATE_PROJECT_ITEM_FIELD = """
    mutation UpdateProjectItemField($projectId: ID!, $itemId: ID!, $fieldId: ID!, $value: ProjectV2FieldValue!) {
      updateProjectV2ItemFieldValue(input: {
        projectId: $projectId
        itemId: $itemId
        fieldId: $fieldId
        value: $value
      }) {
        projectV2Item {
          id
        }
      }
    }
"""

CREATE_PROJECT_FIELD = """
    mutation CreateProjectField(
      $projectId: ID!
      $name: String!
      $dataType: ProjectV2CustomFieldType!
      $singleSelectOptions: [ProjectV2SingleSelectFieldOptionInput!]
    ) {
      createProjectV2Field(input: {
        projectId: $projectId
        name: $name
        dataType: $dataType
        singleSelectOptions: $singleSelectOptions
      }) {
        projectV2Field {
          ... on ProjectV2Field {
            id
            name
            dataType
          }
          ... on ProjectV2SingleSelectField {
            id
            name
            dataType
          }
          ... on ProjectV2IterationField {
            id
            name
            dataType
          }
        }
      }
    }
"""

GET_USER_ID = """
    query GetUserId($login: String!) {
      user(login: $login) {
        id
      }
    }
"""

GET_ORG_ID = """
    query GetOrgId($login: String!) {
      organization(login: $login) {
        id
      }
    }
"""

GET_VIEWER = """
    query GetViewer {
      viewer {
        login
      }
    }
"""

GET_PROJECT_FIELDS_DETAILED = """
    query GetProjectFieldsDetailed($projectId: ID!) {
      node(id: $projectId) {
        ... on ProjectV2 {
          id
          title
          fields(first: 50) {
            nodes {
              ... on ProjectV2Field {
                id
                name
                dataType
                createdAt
                updatedAt
              }
              ... on ProjectV2SingleSelectField {
                id
                name
                dataType
                createdAt
                updatedAt
                options {
                  id
                  name
                  description
                  color
                }
              }
              ... on ProjectV2IterationField {
                id
                name
                dataType
                createdAt
                updatedAt
                configuration {
                  iterations {
                    id
                    title
                    duration
                    startDate
                  }
                }
              }
            }
          }
        }
      }
    }
"""

GET_PROJECT_ITEMS = """
    query GetProjectItems($projectId: ID!, $first: Int!) {
      node(id: $projectId) {
        ... on ProjectV2 {
          id
          title
          items(first: $first) {
            nodes {
              id
              type
              content {
                __typename
                ... on Issue {
                  id
                  number
                  title
                  state
                  url
                  assignees(first: 5) {
                    nodes {
                      login
                    }
                  }
                }
                ... on PullRequest {
                  id
                  number
                  title
                  state
                  url
                  assignees(first: 5) {
                    nodes {
                      login
                    }
                  }
                }
                ... on DraftIssue {
                  id
                  title
                  body
                }
              }
              fieldValues(first: 20) {
                nodes {
                  ... on ProjectV2ItemFieldTextValue {
                    text
                    field {
                      ... on ProjectV2Field {
                        id
                        name
                      }
                    }
                  }
                  ... on ProjectV2ItemFieldNumberValue {
                    number
                    field {
                      ... on ProjectV2Field {
                        id
                        name
                      }
                    }
                  }
                  ... on ProjectV2ItemFieldDateValue {
                    date
                    field {
                      ... on ProjectV2Field {
                        id
                        name
                      }
                    }
                  }
                  ... on ProjectV2ItemFieldSingleSelectValue {
                    name
                    field {
                      ... on ProjectV2SingleSelectField {
                        id
                        name
                      }
                    }
                  }
                  ... on ProjectV2ItemFieldIterationValue {
                    title
                    field {
                      ... on ProjectV2IterationField {
                        id
                        name
                      }
                    }
                  }
                }
              }
            }
          }
        }
      }
    }
"""
