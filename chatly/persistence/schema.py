"""Property names of the Notion databases backing Chatly.

Posts:    Title (title), Content, Author Name, Author ID (rich_text),
          Upvotes Count (number)
Comments: Content, Author Name, Author ID (rich_text), Post (relation),
          Parent (relation, optional)
Upvotes:  User ID (rich_text), Post (relation)
"""

TITLE = "Title"
CONTENT = "Content"
AUTHOR_NAME = "Author Name"
AUTHOR_ID = "Author ID"
UPVOTES_COUNT = "Upvotes Count"
POST = "Post"
PARENT = "Parent"
USER_ID = "User ID"

CREATED_TIME_DESC = [{"timestamp": "created_time", "direction": "descending"}]
CREATED_TIME_ASC = [{"timestamp": "created_time", "direction": "ascending"}]
