"""In-memory library management: books, users and borrowing transactions."""