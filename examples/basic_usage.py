"""Basic usage example for Sortable Posts."""

from sortable_posts.models.post import Post
from sortable_posts.models.term import Term
from sortable_posts.services.reorder_service import ReorderRequest, ReorderService
from sortable_posts.storage import Database, PostRepository, TermRepository


def main():
    """Demonstrate reordering posts and terms."""
    # Initialize database (uses SQLite by default)
    db = Database()

    # Create tables
    db.create_tables()

    with db.session() as session:
        post_repo = PostRepository(session)
        term_repo = TermRepository(session)

        for post_id, title in [("1", "Hello world"), ("2", "About"), ("3", "Contact")]:
            if post_repo.get_by_id(post_id) is None:
                post_repo.create(Post(id=post_id, title=title))
        for term_id, name in [("10", "News"), ("11", "Events")]:
            if term_repo.get_by_id(term_id) is None:
                term_repo.create(Term(id=term_id, name=name))
        session.commit()

        service = ReorderService(session)

        # Payload as sent by the drag and drop script on the posts screen
        result = service.reorder(
            ReorderRequest.from_payload(
                {"order": ["post-3", "post-1", "post-2"], "start": "0", "object_type": "edit"}
            )
        )
        print(f"Posts: {result.message} ({result.updated} updated)")
        for post in post_repo.list_by_menu_order():
            print(f"  {post.menu_order}: {post.title}")

        result = service.reorder(
            ReorderRequest.from_payload({"order": ["tag-11", "tag-10"], "object_type": "edit-tags"})
        )
        print(f"Terms: {result.message}")
        print(f"  {service.current_order(['10', '11'], 'term')}")

        # Unknown ids are a soft failure
        result = service.reorder(ReorderRequest(order=["999"], object_type="post"))
        print(f"Unknown post: {result.code} - {result.message}")


if __name__ == "__main__":
    main()
