"""Datastore v1 messages and service stub.

Names re-exported from the generated bindings in ``clouddatastore._generated``.
Regenerate those with ``python -m clouddatastore.protobuild generate``.
"""

from ._generated.google.datastore.v1 import datastore_pb2
from ._generated.google.datastore.v1 import datastore_pb2_grpc
from ._generated.google.datastore.v1 import entity_pb2
from ._generated.google.datastore.v1 import query_pb2

ArrayValue = entity_pb2.ArrayValue
Entity = entity_pb2.Entity
Key = entity_pb2.Key
PartitionId = entity_pb2.PartitionId
Value = entity_pb2.Value

EntityResult = query_pb2.EntityResult
GqlQuery = query_pb2.GqlQuery
KindExpression = query_pb2.KindExpression
Query = query_pb2.Query
QueryResultBatch = query_pb2.QueryResultBatch

CommitRequest = datastore_pb2.CommitRequest
CommitResponse = datastore_pb2.CommitResponse
LookupRequest = datastore_pb2.LookupRequest
LookupResponse = datastore_pb2.LookupResponse
Mutation = datastore_pb2.Mutation
RunQueryRequest = datastore_pb2.RunQueryRequest
RunQueryResponse = datastore_pb2.RunQueryResponse
TransactionOptions = datastore_pb2.TransactionOptions

DatastoreStub = datastore_pb2_grpc.DatastoreStub
