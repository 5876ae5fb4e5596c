from finloan.database.store import DocumentStore, BeanieDocumentStore, get_store
