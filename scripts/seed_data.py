#!/usr/bin/env python3
# =============================================================================
# scripts/seed_data.py - Sample Data Loader
# =============================================================================
# Creates sample authors and blog posts through the service layer, so the
# same validation (unique userName, existing author) applies as over HTTP.
#
# Usage:
#   python scripts/seed_data.py              # 3 authors x 2 posts
#   python scripts/seed_data.py --posts 5
#
# Prerequisites:
#   - STORE_BACKEND=supabase with SUPABASE_URL / SUPABASE_SERVICE_KEY set
#     (.env file); the memory backend forgets everything on exit
# =============================================================================

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from app.dependencies import build_store, get_repository
from app.exceptions import DuplicateUsernameError
from core.services import AuthorService, BlogPostService

SAMPLE_AUTHORS = [
    {"firstName": "Ada", "lastName": "Lovelace", "userName": "ada"},
    {"firstName": "Alan", "lastName": "Turing", "userName": "aturing"},
    {"firstName": "Grace", "lastName": "Hopper", "userName": "ghopper"},
]


def seed(posts_per_author: int) -> None:
    repository = get_repository(build_store())
    authors = AuthorService(repository)
    blogposts = BlogPostService(repository)

    for sample in SAMPLE_AUTHORS:
        try:
            author = authors.create_author(sample)
            print(f"Created author {sample['userName']} ({author.id})")
        except DuplicateUsernameError:
            author = repository.find_author_by_user_name(sample["userName"])
            print(f"Author {sample['userName']} already exists ({author.id})")

        for n in range(1, posts_per_author + 1):
            post = blogposts.create_blogpost({
                "title": f"{sample['firstName']}'s post #{n}",
                "content": f"Sample content {n} by {sample['firstName']} {sample['lastName']}.",
                "author_id": author.id,
            })
            print(f"  Created blog post {post.id}")


def main():
    parser = argparse.ArgumentParser(description="Seed sample authors and blog posts")
    parser.add_argument("--posts", type=int, default=2, help="Blog posts per author")
    args = parser.parse_args()

    print("=" * 60)
    print("Blog API - seeding sample data")
    print("=" * 60)
    seed(args.posts)


if __name__ == "__main__":
    main()
