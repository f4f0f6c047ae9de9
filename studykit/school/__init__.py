"""School records: student and lecturer types, field validators and input prompts."""