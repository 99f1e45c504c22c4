# Generated by clouddatastore.protobuild. DO NOT EDIT.
