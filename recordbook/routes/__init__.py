"""
Recordbook: API Routes Package
=================================

Route Inventory:
    - records.py: POST   /users          (create record)
                  GET    /users          (list records)
                  GET    /users/{id}     (get single record)
                  PUT    /users/{id}     (update record)
                  DELETE /users/{id}     (delete record)
    - health.py:  GET    /health         (service health check)

Routes stay thin: parse input, call the validator and the store, return
the result. Error formatting lives in the global exception handlers.
"""
